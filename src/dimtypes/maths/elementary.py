from __future__ import annotations

import cmath
import math
from typing import Protocol, Union

Number = Union[int, float, complex]


class Maths(Protocol):
    def sqrt(self, x: Number) -> Number: ...

    def cbrt(self, x: Number) -> Number: ...

    def pow(self, x: Number, y: float) -> Number: ...


class RealMaths:
    def sqrt(self, x: float) -> float:
        return math.sqrt(x)

    def cbrt(self, x: float) -> float:
        return math.cbrt(x)

    def pow(self, x: float, y: float) -> float:
        if x < 0:
            raise ValueError("pow requires a non-negative base")
        return math.pow(x, y)


class ComplexMaths:
    def sqrt(self, z: complex) -> complex:
        return cmath.sqrt(z)

    def cbrt(self, z: complex) -> complex:
        # Principal branch; there is no cmath.cbrt.
        if z == 0:
            return complex(0.0)
        return complex(z) ** (1.0 / 3.0)

    def pow(self, z: complex, y: float) -> complex:
        # 0 ** y for y <= 0 raises ZeroDivisionError.
        if z == 0 and y > 0:
            return complex(0.0)
        return complex(z) ** y


REAL_MATHS = RealMaths()
COMPLEX_MATHS = ComplexMaths()


def maths_for(x: Number) -> Maths:
    if isinstance(x, complex):
        return COMPLEX_MATHS
    return REAL_MATHS


def _round_half_away(x: float) -> float:
    return math.copysign(math.floor(abs(x) + 0.5), x)


def _per_part(fn, x: Number) -> Number:
    if isinstance(x, complex):
        return complex(fn(x.real), fn(x.imag))
    return fn(x)


def abs_value(x: Number) -> Number:
    if isinstance(x, complex):
        return complex(abs(x))
    return abs(x)


def floor_value(x: Number) -> Number:
    return _per_part(lambda v: float(math.floor(v)), x)


def ceil_value(x: Number) -> Number:
    return _per_part(lambda v: float(math.ceil(v)), x)


def round_value(x: Number) -> Number:
    return _per_part(_round_half_away, x)


def round_digits(x: Number, ndigits: int) -> Number:
    return _per_part(lambda v: round(float(v), ndigits), x)


def is_finite(x: Number) -> bool:
    if isinstance(x, complex):
        return cmath.isfinite(x)
    return math.isfinite(x)
