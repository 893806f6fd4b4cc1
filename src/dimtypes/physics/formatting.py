from __future__ import annotations

from dimtypes.maths.elementary import Number


def magnitude_str(value: Number) -> str:
    if isinstance(value, complex):
        sign = "-" if value.imag < 0.0 else "+"
        return f"({value.real:.16e} {sign} {abs(value.imag):.16e} * I)"
    return f"{float(value):.16e}"


def unit_str(unit: str, numer: int, denom: int) -> str:
    """Render one unit with its exponent, e.g. " km", " s^(-2)", " kg^(1/3)"."""
    if numer == 0:
        return ""
    if denom != 1:
        return f" {unit}^({numer}/{denom})"
    if numer == 1:
        return f" {unit}"
    if numer < 0:
        return f" {unit}^({numer})"
    return f" {unit}^{numer}"
