from __future__ import annotations

import json
import math
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dimtypes.common.schema_validate import validate_unit_system

DEFAULT_MAX_DIMS = 8

# max_dims -> (field width in bits, largest prime below 2**width)
_LAYOUTS: dict[int, tuple[int, int]] = {
    7: (9, 509),
    8: (8, 251),
    9: (7, 127),
}


def _check_max_dims(value: int) -> int:
    if value not in _LAYOUTS:
        raise ValueError("max_dims must be one of 7, 8, 9")
    return value


class EncodingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    max_dims: int = DEFAULT_MAX_DIMS

    @field_validator("max_dims")
    @classmethod
    def _max_dims_supported(cls, value: int) -> int:
        return _check_max_dims(value)

    @property
    def p_bits(self) -> int:
        return _LAYOUTS[self.max_dims][0]

    @property
    def p_mod(self) -> int:
        return _LAYOUTS[self.max_dims][1]

    @property
    def p_mask(self) -> int:
        return (1 << self.p_bits) - 1


class UnitSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    name: str = Field(min_length=1)
    scale: float = 1.0

    @field_validator("scale")
    @classmethod
    def _scale_positive(cls, value: float) -> float:
        if not math.isfinite(value) or value <= 0.0:
            raise ValueError("scale must be finite and > 0")
        return value


class DimensionSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    name: str = Field(min_length=1)
    units: List[UnitSpec] = Field(min_length=1)

    @field_validator("units")
    @classmethod
    def _units_well_formed(cls, value: List[UnitSpec]) -> List[UnitSpec]:
        if value[0].scale != 1.0:
            raise ValueError("fundamental unit must have scale 1.0")
        names = [unit.name for unit in value]
        if len(set(names)) != len(names):
            raise ValueError("unit names must be unique within a dimension")
        return value


class UnitSystemSpec(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    max_dims: int = DEFAULT_MAX_DIMS
    dimensions: List[DimensionSpec] = Field(min_length=1)

    @field_validator("max_dims")
    @classmethod
    def _max_dims_supported(cls, value: int) -> int:
        return _check_max_dims(value)

    @model_validator(mode="after")
    def _fits_encoding(self) -> UnitSystemSpec:
        if len(self.dimensions) > self.max_dims:
            raise ValueError("too many dimensions for max_dims")
        names = [dim.name for dim in self.dimensions]
        if len(set(names)) != len(names):
            raise ValueError("dimension names must be unique")
        capacity = self.encoding.p_mask + 1
        for dim in self.dimensions:
            if len(dim.units) > capacity:
                raise ValueError(f"too many units for dimension '{dim.name}'")
        return self

    @property
    def encoding(self) -> EncodingConfig:
        return EncodingConfig(max_dims=self.max_dims)


def load_unit_system_spec(path: Path) -> UnitSystemSpec:
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)
    validate_unit_system(payload)
    return UnitSystemSpec.model_validate(payload)


__all__ = [
    "DEFAULT_MAX_DIMS",
    "DimensionSpec",
    "EncodingConfig",
    "UnitSpec",
    "UnitSystemSpec",
    "load_unit_system_spec",
]
