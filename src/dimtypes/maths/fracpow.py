"""
Rational powers reduced to integer powers and square/cube roots.

x ** (m/n) is evaluated as IntPow(m) of repeated SqRt/CbRt whenever n has no
prime factors other than 2 and 3, so scale factors such as 1/2, 1/3, 2/3 or
3/2 keep full precision and real cube roots of negative bases still work.
Only other denominators fall back to the generic Pow.
"""

from __future__ import annotations

from typing import Optional

from dimtypes.encoding.modular import normalize_fraction
from dimtypes.errors import InvalidFraction
from dimtypes.maths.elementary import Maths, Number, maths_for


def int_pow(x: Number, m: int) -> Number:
    """Exponentiation by squaring."""
    if m < 0:
        return 1.0 / int_pow(x, -m)
    if m == 0:
        return x ** 0
    if m == 1:
        return x
    half_pow = int_pow(x, m // 2)
    half_pow2 = half_pow * half_pow
    if m % 2 == 1:
        return half_pow2 * x
    return half_pow2


def only_2_and_3(n: int) -> bool:
    if n <= 0:
        return False
    while n % 2 == 0:
        n //= 2
    while n % 3 == 0:
        n //= 3
    return n == 1


def frac_pow_23(x: Number, m: int, n: int, maths: Optional[Maths] = None) -> Number:
    if m == 0 or not only_2_and_3(n):
        raise InvalidFraction(f"{m}/{n} is not reducible to square and cube roots")
    maths = maths or maths_for(x)
    while n != 1:
        if n % 2 == 0:
            x = maths.sqrt(x)
            n //= 2
        else:
            x = maths.cbrt(x)
            n //= 3
    return int_pow(x, m)


def frac_pow(x: Number, m: int, n: int, maths: Optional[Maths] = None) -> Number:
    m1, n1 = normalize_fraction(m, n)
    if m1 == 0:
        return int_pow(x, 0)
    if n1 == 1:
        return int_pow(x, m1)
    maths = maths or maths_for(x)
    if only_2_and_3(n1):
        return frac_pow_23(x, m1, n1, maths)
    return maths.pow(x, m1 / n1)
