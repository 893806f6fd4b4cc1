import json
import logging
from pathlib import Path

import pytest

from dimtypes.cli import main
from dimtypes.encoding import get_encodings


def _run(argv: list[str], capsys) -> tuple[int, str, str]:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    captured = capsys.readouterr()
    return excinfo.value.code, captured.out.strip(), captured.err.strip()


def test_max_height(capsys) -> None:
    rc, out, _ = _run(["max-height", "--dims", "9"], capsys)

    assert rc == 0
    assert int(out) == get_encodings(9).max_height


def test_encode_and_decode(capsys) -> None:
    rc, out, _ = _run(["encode", "1", "2", "--dims", "9"], capsys)
    assert (rc, out) == (0, "64")

    residue = get_encodings(9).encode(5, 6)
    rc, out, _ = _run(["decode", str(residue), "--dims", "9"], capsys)
    assert (rc, out) == (0, "5/6")

    rc, out, _ = _run(["decode", "0x0"], capsys)
    assert (rc, out) == (0, "0/1")


def test_errors_are_reported_with_code(capsys) -> None:
    rc, _, err = _run(["encode", "1", "127", "--dims", "9"], capsys)

    assert rc == 1
    assert err.startswith("E_UNINVERTIBLE_MODULUS")


def test_convert(tmp_path: Path, capsys) -> None:
    path = tmp_path / "system.json"
    path.write_text(
        json.dumps(
            {
                "dimensions": [
                    {
                        "name": "Len",
                        "units": [{"name": "m"}, {"name": "km", "scale": 1000.0}],
                    }
                ]
            }
        ),
        encoding="utf-8",
    )

    rc, out, _ = _run(["convert", "--system", str(path), "2.5", "Len", "km", "--to", "m"], capsys)

    assert rc == 0
    assert out == "2.5000000000000000e+03 m"


def test_log_level_configures_logging(monkeypatch, capsys) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    rc, _, _ = _run(["--log-level", "debug", "max-height", "--dims", "9"], capsys)

    assert rc == 0
    assert calls == [{"level": "DEBUG"}]


def test_unknown_log_level_is_a_usage_error(capsys) -> None:
    rc, _, err = _run(["--log-level", "bogus", "max-height"], capsys)

    assert rc == 2
    assert "--log-level" in err
