"""Power reduction and the elementary functions it consumes."""

from dimtypes.maths.elementary import (
    COMPLEX_MATHS,
    REAL_MATHS,
    ComplexMaths,
    Maths,
    RealMaths,
    maths_for,
)
from dimtypes.maths.fracpow import frac_pow, frac_pow_23, int_pow, only_2_and_3

__all__ = [
    "COMPLEX_MATHS",
    "REAL_MATHS",
    "ComplexMaths",
    "Maths",
    "RealMaths",
    "frac_pow",
    "frac_pow_23",
    "int_pow",
    "maths_for",
    "only_2_and_3",
]
