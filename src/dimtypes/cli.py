# Copyright 2026 Joseph Verdicchio
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dimtypes.config import DEFAULT_MAX_DIMS
from dimtypes.encoding import get_encodings
from dimtypes.errors import EncodingError
from dimtypes.physics.system import UnitSystem


def _cmd_max_height(args: argparse.Namespace) -> int:
    print(get_encodings(args.dims).max_height)
    return 0


def _cmd_encode(args: argparse.Namespace) -> int:
    print(get_encodings(args.dims).encode(args.numer, args.denom))
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    numer, denom = get_encodings(args.dims).get_numer_and_denom(int(args.residue, 0))
    print(f"{numer}/{denom}")
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    system = UnitSystem.from_file(Path(args.system))
    q = system.quantity(float(args.value), args.dim, args.unit)
    print(system.format(system.convert(q, args.dim, args.to)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="dimtypes")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_dims(parser: argparse.ArgumentParser) -> None:
        parser.add_argument("--dims", type=int, choices=(7, 8, 9), default=DEFAULT_MAX_DIMS)

    mh = sub.add_parser("max-height", help="Print the collision-free height bound")
    add_dims(mh)
    mh.set_defaults(func=_cmd_max_height)

    enc = sub.add_parser("encode", help="Encode a rational exponent as a residue")
    enc.add_argument("numer", type=int)
    enc.add_argument("denom", type=int)
    add_dims(enc)
    enc.set_defaults(func=_cmd_encode)

    dec = sub.add_parser("decode", help="Decode a residue into numer/denom")
    dec.add_argument("residue", help="Residue, decimal or 0x-prefixed")
    add_dims(dec)
    dec.set_defaults(func=_cmd_decode)

    conv = sub.add_parser("convert", help="Convert a quantity between declared units")
    conv.add_argument("--system", required=True, help="Path to unit system JSON")
    conv.add_argument("value")
    conv.add_argument("dim")
    conv.add_argument("unit")
    conv.add_argument("--to", required=True)
    conv.set_defaults(func=_cmd_convert)

    return p


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level)
    try:
        rc = args.func(args)
    except EncodingError as exc:
        print(str(exc), file=sys.stderr)
        rc = 1
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
