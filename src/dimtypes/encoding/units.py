from __future__ import annotations

from dataclasses import dataclass

from dimtypes.encoding.fields import FieldPacker
from dimtypes.errors import UnificationFailure


@dataclass(frozen=True)
class UnitVectorOps(FieldPacker):
    """Per-dimension unit selectors, packed in the same shape as exponents.

    A selector is only meaningful where the matching exponent field is
    non-zero; cleaned vectors hold 0 everywhere else.
    """

    def set_unit(self, u: int, dim: int, unit: int) -> int:
        return self.clear_and_set(u, dim, unit)

    def mk_unit(self, dim: int, unit: int) -> int:
        return self.set_unit(0, dim, unit)

    def unify_units(self, e: int, f: int, u: int, v: int) -> int:
        res = 0
        for dim in range(self.n_fields):
            e_d = self.get_field(e, dim)
            f_d = self.get_field(f, dim)
            u_d = self.get_field(u, dim)
            v_d = self.get_field(v, dim)
            if e_d == 0:
                unified = 0 if f_d == 0 else v_d
            elif f_d == 0:
                unified = u_d
            elif u_d == v_d:
                unified = u_d
            else:
                raise UnificationFailure(
                    f"units {u_d} and {v_d} differ in dimension {dim}",
                    path=str(dim),
                )
            res |= self.put_field(unified, dim)
        return res

    def units_ok(self, e: int, u: int, v: int) -> bool:
        for dim in range(self.n_fields):
            if self.get_field(e, dim) != 0 and self.get_field(u, dim) != self.get_field(v, dim):
                return False
        return True

    def clean_up_units(self, e: int, u: int) -> int:
        res = 0
        for dim in range(self.n_fields):
            if self.get_field(e, dim) != 0:
                res |= self.put_field(self.get_field(u, dim), dim)
        return res
