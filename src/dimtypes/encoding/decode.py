"""
Recovering (numer, denom) from a residue.

Candidates are enumerated by height = |numer| + denom, then by denominator,
positive numerator before negative. The first match is the rational of
minimal height; this order is what makes decoding deterministic. MaxHeight is
the largest height below which no two reduced rationals share a residue, found
by replaying the same enumeration and stopping at the first collision.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from dimtypes.encoding.modular import ZpArithmetic, gcd, inverse_mod_p
from dimtypes.errors import DecodeExhausted

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def find_max_height(p_mod: int) -> int:
    taken = [False] * p_mod
    for height in range(2, p_mod):
        for denom in range(1, height):
            numer_p = height - denom
            if gcd(numer_p, denom) != 1:
                continue
            inv_denom = inverse_mod_p(denom, p_mod)
            rep_p = numer_p * inv_denom % p_mod
            rep_c = (p_mod - numer_p) * inv_denom % p_mod
            if taken[rep_p] or taken[rep_c]:
                logger.debug("max height for p=%d is %d", p_mod, height - 1)
                return height - 1
            taken[rep_p] = True
            taken[rep_c] = True
    return p_mod - 1


@dataclass(frozen=True)
class ExponentCodec(ZpArithmetic):
    @property
    def max_height(self) -> int:
        return find_max_height(self.p_mod)

    def get_numer_and_denom(self, rep: int) -> tuple[int, int]:
        if rep == 0:
            return 0, 1
        p_mod = self.p_mod
        for height in range(2, self.max_height + 1):
            for denom in range(1, height):
                numer_p = height - denom
                if gcd(numer_p, denom) != 1:
                    continue
                inv_denom = inverse_mod_p(denom, p_mod)
                if numer_p * inv_denom % p_mod == rep:
                    return numer_p, denom
                if (p_mod - numer_p) * inv_denom % p_mod == rep:
                    return -numer_p, denom
        raise DecodeExhausted(
            f"residue {rep} matches no rational of height <= {self.max_height} modulo {p_mod}"
        )

    def decode_vector(self, e: int) -> list[tuple[int, int]]:
        return [self.get_numer_and_denom(self.get_field(e, dim)) for dim in range(self.n_fields)]

    def encode_vector(self, exponents: list[tuple[int, int]]) -> int:
        return self.pack([self.encode(numer, denom) for numer, denom in exponents])
