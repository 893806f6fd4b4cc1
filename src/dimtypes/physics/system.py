from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Union

from dimtypes.config import (
    DEFAULT_MAX_DIMS,
    DimensionSpec,
    UnitSpec,
    UnitSystemSpec,
    load_unit_system_spec,
)
from dimtypes.encoding.codec import Encodings, get_encodings
from dimtypes.errors import DimensionMismatch, InvalidDimension
from dimtypes.maths.elementary import Number
from dimtypes.maths.fracpow import frac_pow
from dimtypes.physics.formatting import magnitude_str, unit_str
from dimtypes.physics.quantity import DimQ

logger = logging.getLogger(__name__)

DimRef = Union[str, int]
UnitRef = Union[str, int]


class UnitSystem:
    """Declared dimensions and their units.

    Dimensions get indices in declaration order; within a dimension, units get
    selectors in declaration order, the fundamental unit being selector 0.
    """

    def __init__(self, spec: UnitSystemSpec) -> None:
        self.spec = spec
        self.encodings: Encodings = get_encodings(spec.max_dims)
        self._dim_index: dict[str, int] = {}
        self._unit_index: list[dict[str, int]] = []
        self._unit_names: list[list[str]] = []
        self._scales: list[list[float]] = []
        for index, dim in enumerate(spec.dimensions):
            self._dim_index[dim.name] = index
            self._unit_index.append({unit.name: sel for sel, unit in enumerate(dim.units)})
            self._unit_names.append([unit.name for unit in dim.units])
            self._scales.append([unit.scale for unit in dim.units])
        logger.debug(
            "declared unit system: %s",
            ", ".join(f"{dim.name}[{', '.join(u.name for u in dim.units)}]" for dim in spec.dimensions),
        )

    @classmethod
    def declare(
        cls,
        dimensions: Sequence[tuple[str, Sequence[tuple[str, float]]]],
        *,
        max_dims: int = DEFAULT_MAX_DIMS,
    ) -> UnitSystem:
        spec = UnitSystemSpec(
            max_dims=max_dims,
            dimensions=[
                DimensionSpec(
                    name=name,
                    units=[UnitSpec(name=unit, scale=float(scale)) for unit, scale in units],
                )
                for name, units in dimensions
            ],
        )
        return cls(spec)

    @classmethod
    def from_file(cls, path: Path) -> UnitSystem:
        return cls(load_unit_system_spec(path))

    @property
    def dimensions(self) -> tuple[str, ...]:
        return tuple(self._dim_index)

    def dimension_index(self, dim: DimRef) -> int:
        if isinstance(dim, str):
            try:
                return self._dim_index[dim]
            except KeyError as exc:
                raise InvalidDimension(f"unknown dimension '{dim}'", path=dim) from exc
        if isinstance(dim, bool) or not isinstance(dim, int) or not 0 <= dim < len(self._scales):
            raise InvalidDimension(f"unknown dimension {dim!r}")
        return dim

    def unit_index(self, dim: DimRef, unit: UnitRef) -> int:
        d = self.dimension_index(dim)
        if isinstance(unit, str):
            try:
                return self._unit_index[d][unit]
            except KeyError as exc:
                raise InvalidDimension(
                    f"unknown unit '{unit}' for dimension '{self.dimensions[d]}'",
                    path=unit,
                ) from exc
        if isinstance(unit, bool) or not isinstance(unit, int) or not 0 <= unit < len(self._scales[d]):
            raise InvalidDimension(f"unknown unit {unit!r} for dimension '{self.dimensions[d]}'")
        return unit

    def scale(self, dim: DimRef, unit: UnitRef) -> float:
        d = self.dimension_index(dim)
        return self._scales[d][self.unit_index(d, unit)]

    def unit_name(self, dim: DimRef, unit: UnitRef) -> str:
        d = self.dimension_index(dim)
        return self._unit_names[d][self.unit_index(d, unit)]

    def unit(self, dim: DimRef, unit: UnitRef) -> DimQ:
        d = self.dimension_index(dim)
        u = self.unit_index(d, unit)
        enc = self.encodings
        return DimQ(1.0, enc.dim_exp(d), enc.mk_unit(d, u), self)

    def quantity(self, value: Number, dim: DimRef, unit: UnitRef) -> DimQ:
        return value * self.unit(dim, unit)

    def dimensionless(self, value: Number) -> DimQ:
        return DimQ(value, 0, 0, self)

    def _require_member(self, q: DimQ) -> None:
        if q.system is not self and q.system.spec != self.spec:
            raise DimensionMismatch("quantity belongs to a different unit system")

    def convert(self, q: DimQ, dim: DimRef, unit: UnitRef) -> DimQ:
        """Express dimension `dim` of `q` in `unit`, rescaling the magnitude."""
        self._require_member(q)
        d = self.dimension_index(dim)
        new_unit = self.unit_index(d, unit)
        enc = self.encodings
        old_unit = enc.get_field(q.units, d)
        numer, denom = enc.get_numer_and_denom(enc.get_field(q.exps, d))
        factor = frac_pow(self._scales[d][old_unit] / self._scales[d][new_unit], numer, denom)
        logger.debug(
            "convert %s: %s -> %s, exponent %d/%d, factor %r",
            self.dimensions[d],
            self._unit_names[d][old_unit],
            self._unit_names[d][new_unit],
            numer,
            denom,
            factor,
        )
        units = enc.clean_up_units(q.exps, enc.set_unit(q.units, d, new_unit))
        return DimQ(q.magnitude * factor, q.exps, units, self)

    def to_fundamental(self, q: DimQ) -> DimQ:
        for d in range(len(self._scales)):
            q = self.convert(q, d, 0)
        return q

    def format(self, q: DimQ) -> str:
        self._require_member(q)
        enc = self.encodings
        parts = [magnitude_str(q.magnitude)]
        for d in range(len(self._scales)):
            numer, denom = enc.get_numer_and_denom(enc.get_field(q.exps, d))
            parts.append(unit_str(self._unit_names[d][enc.get_field(q.units, d)], numer, denom))
        return "".join(parts)
