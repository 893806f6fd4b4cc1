"""
Class DimQ is a magnitude tagged with a packed exponent vector and a packed
unit vector. Every dimensional check happens when an operation is attempted:

  • q1 + q2, q1 - q2, comparisons → same exponents, units must agree
  • q1 * q2, q1 / q2              → exponents added/subtracted, units unified
  • q * k, q / k, k / q           → scalar scaling (k / q negates exponents)
  • q.ipow(m), q ** m             → integer power
  • q.rpow(m, n), q ** Fraction   → rational power
  • q.sqrt(), q.cbrt()            → shortcuts for rpow(1, 2) and rpow(1, 3)

Invalid combinations raise an EncodingError subclass; nothing is coerced.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from fractions import Fraction
from typing import TYPE_CHECKING, Callable

from dimtypes.encoding.codec import Encodings
from dimtypes.errors import DimensionMismatch, InvalidDimension, InvalidFraction, UnitMismatch
from dimtypes.maths.elementary import (
    Number,
    abs_value,
    ceil_value,
    floor_value,
    is_finite,
    round_digits,
    round_value,
)
from dimtypes.maths.fracpow import frac_pow, int_pow

if TYPE_CHECKING:
    from dimtypes.physics.system import UnitSystem

_SCALARS = (int, float, complex)


@dataclass(frozen=True, eq=False)
class DimQ:
    magnitude: Number
    exps: int
    units: int
    system: UnitSystem

    @property
    def encodings(self) -> Encodings:
        return self.system.encodings

    @property
    def dims_code(self) -> int:
        return self.exps

    @property
    def units_code(self) -> int:
        return self.units

    def _with(self, magnitude: Number, exps: int | None = None, units: int | None = None) -> DimQ:
        return DimQ(
            magnitude,
            self.exps if exps is None else exps,
            self.units if units is None else units,
            self.system,
        )

    def _require_same_system(self, other: DimQ) -> None:
        if self.system is not other.system and self.system.spec != other.system.spec:
            raise DimensionMismatch("quantities belong to different unit systems")

    def _require_additive(self, other: DimQ, op: str) -> None:
        self._require_same_system(other)
        if self.exps != other.exps:
            raise DimensionMismatch(f"'{op}' requires equal dimensions")
        if not self.encodings.units_ok(self.exps, self.units, other.units):
            raise UnitMismatch(f"'{op}' requires the same units in every dimension")

    def unit_of(self) -> DimQ:
        return self._with(1.0)

    def is_dimensionless(self) -> bool:
        return self.exps == 0

    def exponents(self) -> list[tuple[int, int]]:
        return self.encodings.decode_vector(self.exps)

    # Same dimensions

    def __add__(self, other: object) -> DimQ:
        if not isinstance(other, DimQ):
            return NotImplemented
        self._require_additive(other, "+")
        return self._with(self.magnitude + other.magnitude)

    def __sub__(self, other: object) -> DimQ:
        if not isinstance(other, DimQ):
            return NotImplemented
        self._require_additive(other, "-")
        return self._with(self.magnitude - other.magnitude)

    def __neg__(self) -> DimQ:
        return self._with(-self.magnitude)

    def __abs__(self) -> DimQ:
        return self._with(abs_value(self.magnitude))

    def floor(self) -> DimQ:
        return self._with(floor_value(self.magnitude))

    def ceil(self) -> DimQ:
        return self._with(ceil_value(self.magnitude))

    def round(self) -> DimQ:
        return self._with(round_value(self.magnitude))

    def __floor__(self) -> DimQ:
        return self.floor()

    def __ceil__(self) -> DimQ:
        return self.ceil()

    def __round__(self, ndigits: int | None = None) -> DimQ:
        if ndigits is not None:
            return self._with(round_digits(self.magnitude, ndigits))
        return self.round()

    # Changing dimensions

    def __mul__(self, other: object) -> DimQ:
        if isinstance(other, DimQ):
            self._require_same_system(other)
            enc = self.encodings
            exps = enc.add_exp(self.exps, other.exps)
            units = enc.clean_up_units(exps, enc.unify_units(self.exps, other.exps, self.units, other.units))
            return DimQ(self.magnitude * other.magnitude, exps, units, self.system)
        if isinstance(other, _SCALARS):
            return self._with(self.magnitude * other)
        return NotImplemented

    def __rmul__(self, other: object) -> DimQ:
        if isinstance(other, _SCALARS):
            return self._with(other * self.magnitude)
        return NotImplemented

    def __truediv__(self, other: object) -> DimQ:
        if isinstance(other, DimQ):
            self._require_same_system(other)
            enc = self.encodings
            exps = enc.sub_exp(self.exps, other.exps)
            units = enc.clean_up_units(exps, enc.unify_units(self.exps, other.exps, self.units, other.units))
            return DimQ(self.magnitude / other.magnitude, exps, units, self.system)
        if isinstance(other, _SCALARS):
            return self._with(self.magnitude / other)
        return NotImplemented

    def __rtruediv__(self, other: object) -> DimQ:
        if isinstance(other, _SCALARS):
            return self._with(other / self.magnitude, exps=self.encodings.sub_exp(0, self.exps))
        return NotImplemented

    def ipow(self, m: int) -> DimQ:
        enc = self.encodings
        exps = enc.mult_exp(self.exps, m)
        return self._with(int_pow(self.magnitude, m), exps, enc.clean_up_units(exps, self.units))

    def rpow(self, m: int, n: int) -> DimQ:
        enc = self.encodings
        if n <= 0 or n % enc.p_mod == 0:
            raise InvalidFraction(f"invalid root degree {n}")
        exps = enc.div_exp(enc.mult_exp(self.exps, m), n)
        return self._with(frac_pow(self.magnitude, m, n), exps, enc.clean_up_units(exps, self.units))

    def sqrt(self) -> DimQ:
        return self.rpow(1, 2)

    def cbrt(self) -> DimQ:
        return self.rpow(1, 3)

    def __pow__(self, power: object) -> DimQ:
        if isinstance(power, bool):
            return NotImplemented
        if isinstance(power, int):
            return self.ipow(power)
        if isinstance(power, Fraction):
            return self.rpow(power.numerator, power.denominator)
        return NotImplemented

    # Comparisons

    def _compare(self, other: object, op: Callable[[Number, Number], bool], symbol: str) -> bool:
        if not isinstance(other, DimQ):
            return NotImplemented
        self._require_additive(other, symbol)
        return op(self.magnitude, other.magnitude)

    def __eq__(self, other: object) -> bool:
        return self._compare(other, operator.eq, "==")

    def __ne__(self, other: object) -> bool:
        return self._compare(other, operator.ne, "!=")

    def __lt__(self, other: object) -> bool:
        return self._compare(other, operator.lt, "<")

    def __le__(self, other: object) -> bool:
        return self._compare(other, operator.le, "<=")

    def __gt__(self, other: object) -> bool:
        return self._compare(other, operator.gt, ">")

    def __ge__(self, other: object) -> bool:
        return self._compare(other, operator.ge, ">=")

    __hash__ = None  # type: ignore[assignment]

    def is_zero(self) -> bool:
        return self.magnitude == 0

    def is_finite(self) -> bool:
        return is_finite(self.magnitude)

    def is_neg(self) -> bool:
        return self.magnitude < 0

    def is_pos(self) -> bool:
        return self.magnitude > 0

    def _require_dimensionless(self, op: str) -> None:
        if not self.is_dimensionless():
            raise InvalidDimension(f"{op} requires a dimensionless quantity")

    def __float__(self) -> float:
        self._require_dimensionless("float()")
        return float(self.magnitude)

    def __complex__(self) -> complex:
        self._require_dimensionless("complex()")
        return complex(self.magnitude)

    def __str__(self) -> str:
        return self.system.format(self)

    def __repr__(self) -> str:
        return f"DimQ({self.magnitude!r}, exps={self.exps:#x}, units={self.units:#x})"
