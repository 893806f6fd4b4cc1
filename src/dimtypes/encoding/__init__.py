"""Bit-packed rational exponent and unit vector encodings."""

from dimtypes.encoding.codec import Encodings, get_encodings
from dimtypes.encoding.decode import ExponentCodec, find_max_height
from dimtypes.encoding.fields import WORD_BITS, FieldPacker
from dimtypes.encoding.modular import (
    ZpArithmetic,
    gcd,
    inverse_mod_p,
    normalize_fraction,
    normalize_mod,
)
from dimtypes.encoding.units import UnitVectorOps

__all__ = [
    "WORD_BITS",
    "Encodings",
    "ExponentCodec",
    "FieldPacker",
    "UnitVectorOps",
    "ZpArithmetic",
    "find_max_height",
    "gcd",
    "get_encodings",
    "inverse_mod_p",
    "normalize_fraction",
    "normalize_mod",
]
