# vib_core/shell.py
"""
Donnell-Mushtari shell theory for the stator core and the frame.

The core is treated as a thin ring (second order characteristic equation,
closed form root), the frame as a clamped-clamped cylindrical shell (third
order characteristic equation, solved numerically).
"""
from __future__ import annotations
from typing import Sequence
import logging
import numpy as np
from scipy.linalg import companion, eigvals

from .errors import InvalidInputError, RootSelectionError
from .machine import MachineParameters
from .masses import CoreGeometry, mean_frame_radius

logger = logging.getLogger(__name__)

DEFAULT_REAL_ROOT_TOL = 1e-8
NEAR_REAL_ROOT_TOL = 1e-4    # complex roots closer than this to the axis are reported


def checked_sqrt(value, what: str):
    """np.sqrt that refuses negative arguments instead of returning NaN."""
    arr = np.asarray(value, dtype=float)
    if np.any(arr < 0.0):
        raise InvalidInputError(f"Negative value under square root in {what}: {arr[arr < 0.0]}")
    return np.sqrt(value)


# ---------------------------------------------------------------------------
# Core: second order equation  x^2 - A(m) x + kappa2 m^6 = 0,  x = Omega^2
# ---------------------------------------------------------------------------

def core_frequency_coefficient(kappa2: float, m: int) -> float:
    """
    Omega(m) = sqrt(0.5 * (A - sqrt(A^2 - 4 kappa2 m^6))),  A = 1 + m^2 + kappa2 m^4

    m = 0 is the breathing mode, Omega(0) = 1.
    """
    if m == 0:
        return 1.0

    A = 1.0 + m ** 2 + kappa2 * m ** 4
    c = kappa2 * m ** 6
    disc = checked_sqrt(A ** 2 - 4.0 * c, f"core characteristic equation (m={m})")

    # smaller root written as c / x_large to avoid cancellation for thin cores
    omega2 = 2.0 * c / (A + disc)
    return float(np.sqrt(omega2))


def donnell_mushtari2(kappa2: float, radial_orders: Sequence[int]) -> np.ndarray:
    return np.array([core_frequency_coefficient(kappa2, int(m)) for m in radial_orders],
                    dtype=float)


def core_stiffness(params: MachineParameters,
                   geometry: CoreGeometry,
                   radial_orders: Sequence[int]) -> np.ndarray:
    """K_mc = 4 Omega^2 / D_c * pi * L * h_c * E_c / (1 - nu_c^2)"""
    omega = donnell_mushtari2(geometry.kappa2, radial_orders)
    return (4.0 * omega ** 2 / geometry.D_c * np.pi * params.L * geometry.h_c
            * params.E_plane / (1.0 - params.nu_plane ** 2))


def hoppe_core_stiffness(params: MachineParameters,
                         geometry: CoreGeometry,
                         radial_orders: Sequence[int]) -> np.ndarray:
    """Ring bending stiffness after Hoppe, an alternative to the shell model."""
    m = np.asarray(radial_orders, dtype=float)
    D_c, h_c = geometry.D_c, geometry.h_c
    return (16.0 / 12.0 * np.pi * params.E_plane * h_c ** 3 * params.L / D_c ** 3
            * m ** 2 * (m ** 2 - 1.0) ** 2 / (m ** 2 + 1.0))


CORE_MODELS = {
    "donnell": core_stiffness,
    "hoppe": hoppe_core_stiffness,
}


# ---------------------------------------------------------------------------
# Frame: third order equation  x^3 - C2 x^2 + C1 x - C0 = 0,  x = Omega^2
# ---------------------------------------------------------------------------

def frame_cubic_coefficients(m: int, n: int,
                             nu_f: float, R_f: float, L_f: float, h_f: float
                             ) -> tuple[float, float, float]:
    """Coefficients (C2, C1, C0) for a clamped-clamped frame shell."""
    L0 = L_f * 0.3 / (n + 0.3)                 # effective length reduction
    lam = n * np.pi * R_f / (L_f - L0)         # axial wave number
    kappa2_f = h_f ** 2 / (12.0 * R_f ** 2)

    q = m ** 2 + lam ** 2

    C2 = 1.0 + 0.5 * (3.0 - nu_f) * q + kappa2_f * q ** 2
    C1 = 0.5 * (1.0 - nu_f) * ((3.0 + 2.0 * nu_f) * lam ** 2 + m ** 2 + q ** 2
                               + (3.0 - nu_f) / (1.0 - nu_f) * kappa2_f * q ** 2)
    C0 = 0.5 * (1.0 - nu_f) * ((1.0 - nu_f ** 2) * lam ** 4 + kappa2_f * q ** 4)
    return float(C2), float(C1), float(C0)


def cubic_roots(C2: float, C1: float, C0: float) -> np.ndarray:
    # eigenvalues of the companion matrix of x^3 - C2 x^2 + C1 x - C0
    return eigvals(companion([1.0, -C2, C1, -C0]))


def smallest_real_root(roots: np.ndarray, tol: float = DEFAULT_REAL_ROOT_TOL) -> float:
    roots = np.asarray(roots, dtype=complex)
    scale = np.maximum(1.0, np.abs(roots))
    is_real = np.abs(roots.imag) <= tol * scale

    near_real = ~is_real & (np.abs(roots.imag) <= NEAR_REAL_ROOT_TOL * scale)
    if np.any(near_real):
        logger.warning("Discarding nearly real cubic roots as complex (tol=%g): %s",
                       tol, roots[near_real])

    if not np.any(is_real):
        raise RootSelectionError(f"Characteristic cubic has no real root (roots: {roots})")

    return float(np.min(roots.real[is_real]))


def frame_frequency_coefficient(m: int, n: int,
                                nu_f: float, R_f: float, L_f: float, h_f: float,
                                tol: float = DEFAULT_REAL_ROOT_TOL) -> float:
    """Omega^2(m, n): smallest real root, i.e. the fundamental clamped-clamped mode."""
    C2, C1, C0 = frame_cubic_coefficients(m, n, nu_f, R_f, L_f, h_f)
    roots = cubic_roots(C2, C1, C0)
    try:
        omega2 = smallest_real_root(roots, tol)
    except RootSelectionError as e:
        raise RootSelectionError(f"Mode ({m},{n}): {e}") from e

    logger.debug("Mode (%d,%d): roots=%s -> Omega^2=%.6g", m, n, roots, omega2)
    return omega2


def donnell_mushtari3(radial_orders: Sequence[int],
                      axial_orders: Sequence[int],
                      nu_f: float, R_f: float, L_f: float, h_f: float,
                      tol: float = DEFAULT_REAL_ROOT_TOL) -> np.ndarray:
    if len(radial_orders) != len(axial_orders):
        raise InvalidInputError("Radial and axial order sequences must have the same length")

    return np.array([
        frame_frequency_coefficient(int(m), int(n), nu_f, R_f, L_f, h_f, tol)
        for m, n in zip(radial_orders, axial_orders)
    ], dtype=float)


def frame_stiffness(params: MachineParameters,
                    radial_orders: Sequence[int],
                    axial_orders: Sequence[int],
                    tol: float = DEFAULT_REAL_ROOT_TOL) -> np.ndarray:
    """K_mn = 2 Omega^2 / R_f * pi * L_f * h_f * E_f / (1 - nu_f^2)"""
    R_f = mean_frame_radius(params)
    omega2 = donnell_mushtari3(radial_orders, axial_orders,
                               params.nu_f, R_f, params.L_f, params.h_f, tol)
    return (2.0 * omega2 / R_f * np.pi * params.L_f * params.h_f
            * params.E_f / (1.0 - params.nu_f ** 2))
