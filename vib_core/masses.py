# vib_core/masses.py
from __future__ import annotations
from dataclasses import dataclass
import logging
import numpy as np

from .machine import MachineParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CoreGeometry:
    D_c: float      # mean core diameter
    h_c: float      # shell thickness (taken as the yoke thickness)
    w_s: float      # slot width
    kappa2: float   # non-dimensional thickness h_c^2 / (3 D_c^2)


@dataclass(frozen=True)
class ComponentMasses:
    M_c: float      # core (yoke)
    M_t: float      # teeth
    M_w: float      # winding, slot + overhang
    M_f: float      # frame

    @property
    def k_md(self) -> float:
        """Mass-addition factor: teeth ride on the yoke without adding stiffness."""
        return 1.0 + self.M_t / self.M_c

    @property
    def M_0(self) -> float:
        """Effective core mass used for the core dynamics."""
        return self.M_c * self.k_md

    @property
    def total(self) -> float:
        """Mass seen by the assembled core + frame system."""
        return self.M_0 + self.M_f + self.M_w

    def as_dict(self) -> dict:
        return {
            "core": self.M_c,
            "teeth": self.M_t,
            "winding": self.M_w,
            "frame": self.M_f,
            "mass_addition_factor": self.k_md,
            "effective_core": self.M_0,
        }


def core_geometry(params: MachineParameters) -> CoreGeometry:
    h_c = params.w_bi
    D_c = 2.0 * params.R_so - h_c

    # no check on the sign, a negative slot width is passed on as is
    w_s = 2.0 * np.pi / params.s * params.R_si - params.w_th

    kappa2 = h_c ** 2 / (3.0 * D_c ** 2)
    return CoreGeometry(D_c=D_c, h_c=h_c, w_s=w_s, kappa2=kappa2)


def mean_frame_radius(params: MachineParameters) -> float:
    return 0.5 * (params.D_f - params.h_f)


def component_masses(params: MachineParameters,
                     geometry: CoreGeometry | None = None) -> ComponentMasses:
    """
    Lumped masses of the stator parts:

        M_c = pi * D_c * h_c * L * rho_c * k_i
        M_t = s * d_s * w_th * L * rho_c * k_i
        M_w = (s * w_s * d_s * L + (w_s + w_th) * D_c * pi * d_s) * rho_w
        M_f = 2 * pi * R_f * h_f * L_f * rho_f
    """
    if geometry is None:
        geometry = core_geometry(params)

    D_c, h_c, w_s = geometry.D_c, geometry.h_c, geometry.w_s
    lam = params.rho_c * params.k_i   # laminated steel per unit volume

    M_c = np.pi * D_c * h_c * params.L * lam
    M_t = params.s * params.d_s * params.w_th * params.L * lam

    slot_volume = params.s * w_s * params.d_s * params.L
    overhang_volume = (w_s + params.w_th) * D_c * np.pi * params.d_s
    M_w = (slot_volume + overhang_volume) * params.rho_w

    R_f = mean_frame_radius(params)
    M_f = np.pi * 2.0 * R_f * params.h_f * params.L_f * params.rho_f

    masses = ComponentMasses(M_c=float(M_c), M_t=float(M_t),
                             M_w=float(M_w), M_f=float(M_f))
    logger.debug("Component masses [kg]: core=%.4g teeth=%.4g winding=%.4g frame=%.4g",
                 masses.M_c, masses.M_t, masses.M_w, masses.M_f)
    return masses
