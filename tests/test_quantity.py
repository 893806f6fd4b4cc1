import math
from fractions import Fraction

import pytest

from dimtypes.errors import (
    DimensionMismatch,
    InvalidDimension,
    InvalidFraction,
    UnificationFailure,
    UnitMismatch,
)
from dimtypes.physics.system import UnitSystem


def test_speed_carries_length_over_time(astro: UnitSystem) -> None:
    km = astro.unit("Len", "km")
    sec = astro.unit("Time", "sec")

    speed = 299792.458 * km / sec

    assert speed.magnitude == 299792.458
    assert speed.exponents()[:3] == [(1, 1), (-1, 1), (0, 1)]
    assert speed.units_code == astro.encodings.mk_unit(0, 1)


def test_add_requires_same_dimensions(astro: UnitSystem) -> None:
    km = astro.unit("Len", "km")
    sec = astro.unit("Time", "sec")

    with pytest.raises(DimensionMismatch) as excinfo:
        km + sec

    assert excinfo.value.code == "E_DIMENSION_MISMATCH"


def test_add_requires_same_units(astro: UnitSystem) -> None:
    km = astro.unit("Len", "km")
    m = astro.unit("Len", "m")

    with pytest.raises(UnitMismatch) as excinfo:
        km - m

    assert excinfo.value.code == "E_UNIT_MISMATCH"
    assert (2.0 * km + 3.0 * km).magnitude == 5.0


def test_multiply_rejects_conflicting_units(astro: UnitSystem) -> None:
    with pytest.raises(UnificationFailure):
        astro.unit("Len", "km") * astro.unit("Len", "m")


def test_ratio_of_same_units_is_canonical_dimensionless(astro: UnitSystem) -> None:
    x = 10.0 * astro.unit("Len", "km") / astro.unit("Time", "sec")
    z = 1.0 / x

    dl = x * z

    assert z.magnitude == pytest.approx(0.1)
    assert z.exponents()[:2] == [(-1, 1), (1, 1)]
    assert dl.is_dimensionless()
    assert dl.units_code == 0
    assert float(dl) == pytest.approx(1.0)
    assert dl == astro.dimensionless(1.0)


def test_integer_powers(astro: UnitSystem) -> None:
    au = astro.unit("Len", "AU")
    day = astro.unit("Time", "day")

    gms = 2.959122082855911e-4 * au.ipow(3) / day**2

    assert gms.exponents()[:2] == [(3, 1), (-2, 1)]
    assert gms.magnitude == 2.959122082855911e-4
    assert au.ipow(0).is_dimensionless()
    assert au.ipow(0).units_code == 0
    assert (au**-1).exponents()[0] == (-1, 1)


def test_roots(astro: UnitSystem) -> None:
    km = astro.unit("Len", "km")
    kg = astro.unit("Mass", "kg")

    side = (4.0 * km * km).sqrt()
    tonne_root = (1000.0 * kg).cbrt()

    assert side.magnitude == 2.0
    assert side.exponents()[0] == (1, 1)
    assert side.units_code == km.units_code
    assert tonne_root.magnitude == pytest.approx(10.0)
    assert tonne_root.exponents()[2] == (1, 3)
    assert str(tonne_root).endswith(" kg^(1/3)")


def test_rational_power_operator(astro: UnitSystem) -> None:
    km = astro.unit("Len", "km")

    q = (4.0 * km) ** Fraction(3, 2)

    assert q.magnitude == pytest.approx(8.0)
    assert q.exponents()[0] == (3, 2)


@pytest.mark.parametrize("n", [0, -2, 251])
def test_rpow_rejects_bad_degree(astro: UnitSystem, n: int) -> None:
    with pytest.raises(InvalidFraction):
        astro.unit("Len", "km").rpow(1, n)


def test_comparisons(astro: UnitSystem) -> None:
    km = astro.unit("Len", "km")
    m = astro.unit("Len", "m")

    assert 1.0 * km < 2.0 * km
    assert 2.0 * km >= 2.0 * km
    assert 1.0 * km != 3.0 * km
    with pytest.raises(UnitMismatch):
        km < m
    with pytest.raises(DimensionMismatch):
        km == astro.unit("Time", "sec")


def test_magnitude_helpers(astro: UnitSystem) -> None:
    q = -2.5 * astro.unit("Len", "km")

    assert (-q).magnitude == 2.5
    assert abs(q).magnitude == 2.5
    assert q.round().magnitude == -3.0
    assert math.floor(q).magnitude == -3.0
    assert math.ceil(q).magnitude == -2.0
    assert q.is_neg() and not q.is_pos() and not q.is_zero()
    assert q.is_finite()
    assert q.unit_of().magnitude == 1.0
    assert q.unit_of().units_code == q.units_code


def test_scalar_extraction_requires_dimensionless(astro: UnitSystem) -> None:
    with pytest.raises(InvalidDimension):
        float(astro.unit("Len", "km"))


def test_scalars_multiply_on_either_side(astro: UnitSystem) -> None:
    km = astro.unit("Len", "km")

    assert (km * 3).magnitude == 3.0
    assert (3 * km).magnitude == 3.0
    assert (km / 4).magnitude == 0.25


def test_quantities_from_equal_systems_combine(astro: UnitSystem) -> None:
    twin = UnitSystem(astro.spec)
    other = UnitSystem.declare([("Len", [("ft", 1.0)])])

    assert (astro.unit("Len", "km") * twin.unit("Len", "km")).exponents()[0] == (2, 1)
    with pytest.raises(DimensionMismatch):
        astro.unit("Len", "m") * other.unit("Len", "ft")


def test_codes_expose_packed_vectors(astro: UnitSystem) -> None:
    enc = astro.encodings
    km = astro.unit("Len", "km")
    sec = astro.unit("Time", "sec")

    assert km.dims_code == enc.dim_exp(0)
    assert (km / sec).dims_code == enc.sub_exp(enc.dim_exp(0), enc.dim_exp(1))
    assert (km / km).dims_code == 0
    assert km.units_code == enc.mk_unit(0, 1)


def test_complex_magnitudes(astro: UnitSystem) -> None:
    q = (2.567 + 1.234j) * astro.unit("Len", "km")

    rounded = round(q, 1)

    assert rounded.magnitude == pytest.approx(2.6 + 1.2j)
    assert rounded.units_code == q.units_code
    assert isinstance(q.ipow(0).magnitude, complex)
    assert q.ipow(0).magnitude == 1 + 0j
