"""Physical quantities carrying rational dimension exponents and units."""

from dimtypes.config import EncodingConfig, UnitSystemSpec, load_unit_system_spec
from dimtypes.encoding import Encodings, find_max_height, get_encodings
from dimtypes.errors import (
    DecodeExhausted,
    DimensionMismatch,
    EncodingError,
    InvalidDimension,
    InvalidFraction,
    UnificationFailure,
    UninvertibleModulus,
    UnitMismatch,
)
from dimtypes.maths import frac_pow, int_pow
from dimtypes.physics import DimQ, UnitSystem

__all__ = [
    "DecodeExhausted",
    "DimQ",
    "DimensionMismatch",
    "EncodingConfig",
    "EncodingError",
    "Encodings",
    "InvalidDimension",
    "InvalidFraction",
    "UnificationFailure",
    "UninvertibleModulus",
    "UnitMismatch",
    "UnitSystem",
    "UnitSystemSpec",
    "find_max_height",
    "frac_pow",
    "get_encodings",
    "int_pow",
    "load_unit_system_spec",
]
