"""
Rational exponents as residues modulo a prime P.

A rational m/n is stored as m * n^-1 mod P in one field of the exponent
vector. Multiplying or dividing quantities adds or subtracts the fields;
integer powers and roots multiply a field by m or by n^-1.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from dimtypes.encoding.fields import FieldPacker
from dimtypes.errors import InvalidFraction, UninvertibleModulus


def gcd(m: int, n: int) -> int:
    return math.gcd(m, n)


def normalize_fraction(m: int, n: int) -> tuple[int, int]:
    """Reduce m/n by gcd and move the sign into the numerator."""
    if n == 0:
        raise InvalidFraction(f"zero denominator in {m}/{n}")
    divisor = gcd(m, n)
    sign = 1 if n > 0 else -1
    return sign * m // divisor, abs(n) // divisor


def normalize_mod(x: int, p_mod: int) -> int:
    return x % p_mod


def inverse_mod_p(n: int, p_mod: int) -> int:
    """Extended Euclid: returns c in [0, P-1] with c * n == 1 (mod P)."""
    if n % p_mod == 0:
        raise UninvertibleModulus(f"{n} has no inverse modulo {p_mod}")
    x = normalize_mod(n, p_mod)
    y = p_mod
    a, c = 1, 0
    while x != 0:
        q, r = divmod(y, x)
        y, x = x, r
        a, c = c - q * a, a
    # y is now gcd(n, P); P is prime so it must be 1.
    if y != 1:
        raise UninvertibleModulus(f"{n} is not coprime to {p_mod}")
    return normalize_mod(c, p_mod)


@dataclass(frozen=True)
class ZpArithmetic(FieldPacker):
    p_mod: int

    def __post_init__(self) -> None:
        super().__post_init__()
        if not 2 <= self.p_mod <= self.mask:
            raise ValueError("p_mod must fit into a field")

    def normalize(self, x: int) -> int:
        return normalize_mod(x, self.p_mod)

    def inverse_mod_p(self, n: int) -> int:
        return inverse_mod_p(n, self.p_mod)

    def encode(self, numer: int, denom: int = 1) -> int:
        """Residue of numer/denom."""
        if denom == 0:
            raise InvalidFraction(f"zero denominator in {numer}/{denom}")
        return self.normalize(numer) * self.inverse_mod_p(denom) % self.p_mod

    def add_exp(self, e: int, f: int) -> int:
        if e == 0:
            return f
        if f == 0:
            return e
        res = 0
        for dim in range(self.n_fields):
            res |= self.put_field((self.get_field(e, dim) + self.get_field(f, dim)) % self.p_mod, dim)
        return res

    def sub_exp(self, e: int, f: int) -> int:
        if f == 0:
            return e
        res = 0
        for dim in range(self.n_fields):
            value = (self.p_mod + self.get_field(e, dim) - self.get_field(f, dim)) % self.p_mod
            res |= self.put_field(value, dim)
        return res

    def mult_exp(self, e: int, m: int) -> int:
        if m == 1:
            return e
        factor = self.normalize(m)
        res = 0
        for dim in range(self.n_fields):
            res |= self.put_field(self.get_field(e, dim) * factor % self.p_mod, dim)
        return res

    def div_exp(self, e: int, n: int) -> int:
        if n == 0:
            raise UninvertibleModulus("cannot take the 0-th root of an exponent vector")
        if n == 1:
            return e
        factor = self.inverse_mod_p(n)
        res = 0
        for dim in range(self.n_fields):
            res |= self.put_field(self.get_field(e, dim) * factor % self.p_mod, dim)
        return res
