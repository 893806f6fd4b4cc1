from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dimtypes.errors import InvalidDimension

WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1


@dataclass(frozen=True)
class FieldPacker:
    """Fixed-width fields packed into one 64-bit word, field 0 in the low bits."""

    n_fields: int
    width: int

    def __post_init__(self) -> None:
        if self.n_fields <= 0:
            raise ValueError("n_fields must be > 0")
        if self.width <= 0:
            raise ValueError("width must be > 0")
        if self.n_fields * self.width > WORD_BITS:
            raise ValueError("fields do not fit into a 64-bit word")

    @property
    def mask(self) -> int:
        return (1 << self.width) - 1

    def check_dim(self, dim: int) -> int:
        if isinstance(dim, bool) or not isinstance(dim, int):
            raise InvalidDimension("dimension index must be int")
        if not 0 <= dim < self.n_fields:
            raise InvalidDimension(
                f"dimension index {dim} out of range [0, {self.n_fields})",
            )
        return dim

    def get_field(self, word: int, dim: int) -> int:
        self.check_dim(dim)
        return (word >> (dim * self.width)) & self.mask

    def put_field(self, value: int, dim: int) -> int:
        self.check_dim(dim)
        return (value & self.mask) << (dim * self.width)

    def clear_and_set(self, word: int, dim: int, value: int) -> int:
        self.check_dim(dim)
        shift = dim * self.width
        cleared = word & ~(self.mask << shift) & WORD_MASK
        return cleared | self.put_field(value, dim)

    def unpack(self, word: int) -> tuple[int, ...]:
        return tuple(self.get_field(word, dim) for dim in range(self.n_fields))

    def pack(self, values: Sequence[int]) -> int:
        if len(values) > self.n_fields:
            raise InvalidDimension(f"at most {self.n_fields} fields can be packed")
        word = 0
        for dim, value in enumerate(values):
            word |= self.put_field(value, dim)
        return word
