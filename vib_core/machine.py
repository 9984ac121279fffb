# vib_core/machine.py
from __future__ import annotations
from dataclasses import dataclass, fields, asdict

from .errors import InvalidInputError


@dataclass(frozen=True)
class MachineParameters:
    """
    Geometry and material data of the stator core, winding and frame.
    SI units throughout (m, kg/m^3, Pa).
    """
    # stator core
    s: int              # number of slots
    R_so: float         # stator outer radius
    R_si: float         # stator inner radius
    w_bi: float         # yoke thickness
    L: float            # stack length
    k_i: float          # stacking factor
    d_s: float          # slot depth
    w_th: float         # tooth width
    rho_c: float        # core density
    E_plane: float      # in-plane Young's modulus of the laminations
    nu_plane: float     # in-plane Poisson ratio of the laminations

    # frame
    D_f: float          # frame outer diameter
    L_f: float          # frame length
    h_f: float          # frame thickness
    rho_f: float        # frame density
    E_f: float          # frame Young's modulus
    nu_f: float         # frame Poisson ratio

    # winding
    rho_w: float        # winding density

    @classmethod
    def from_dict(cls, data: dict) -> "MachineParameters":
        names = [f.name for f in fields(cls)]
        missing = [name for name in names if name not in data]
        if missing:
            raise InvalidInputError(f"Missing machine parameters: {', '.join(missing)}")

        values = {name: float(data[name]) for name in names}
        if not values["s"].is_integer():
            raise InvalidInputError(f"Slot count must be a whole number, got {data['s']}")
        values["s"] = int(values["s"])
        return cls(**values)

    def as_dict(self) -> dict:
        return asdict(self)
