from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from dimtypes.config import DEFAULT_MAX_DIMS, EncodingConfig
from dimtypes.encoding.decode import ExponentCodec
from dimtypes.encoding.units import UnitVectorOps


@dataclass(frozen=True)
class Encodings(ExponentCodec, UnitVectorOps):
    """Exponent and unit vector operations for one (N, W, P) configuration."""

    @classmethod
    def from_config(cls, config: EncodingConfig) -> Encodings:
        return cls(n_fields=config.max_dims, width=config.p_bits, p_mod=config.p_mod)

    @property
    def max_dims(self) -> int:
        return self.n_fields

    def dim_exp(self, dim: int) -> int:
        return self.put_field(1, dim)


@lru_cache(maxsize=None)
def get_encodings(max_dims: int = DEFAULT_MAX_DIMS) -> Encodings:
    return Encodings.from_config(EncodingConfig(max_dims=max_dims))
