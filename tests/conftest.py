import pytest

from dimtypes.physics.system import UnitSystem


@pytest.fixture
def astro() -> UnitSystem:
    return UnitSystem.declare(
        [
            ("Len", [("m", 1.0), ("km", 1000.0), ("AU", 1.495978706996262e11)]),
            ("Time", [("sec", 1.0), ("day", 86400.0)]),
            ("Mass", [("kg", 1.0)]),
        ],
        max_dims=8,
    )
