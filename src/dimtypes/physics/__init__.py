"""Dimensioned quantities and declared unit systems."""

from dimtypes.physics.formatting import magnitude_str, unit_str
from dimtypes.physics.quantity import DimQ
from dimtypes.physics.system import UnitSystem

__all__ = [
    "DimQ",
    "UnitSystem",
    "magnitude_str",
    "unit_str",
]
