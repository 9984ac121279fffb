# vib_core/frequencies.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence
import logging
import numpy as np
import pandas as pd

from .errors import InvalidInputError
from .machine import MachineParameters
from .masses import ComponentMasses, core_geometry, component_masses
from .modes import AXIAL_ORDERS, mode_pairs
from .shell import CORE_MODELS, DEFAULT_REAL_ROOT_TOL, checked_sqrt, frame_stiffness

logger = logging.getLogger(__name__)

DESCRIPTION = "Natural frequencies for mode (m,n) in Hz"
COLUMNS = ("Stator Core", "Frame", "Assembly")


@dataclass(frozen=True)
class FrequencyRow:
    m: int              # radial order
    n: int              # axial order
    core: float         # f [Hz], stator core alone
    frame: float        # f [Hz], frame alone
    assembly: float     # f [Hz], core + frame + winding

    @property
    def label(self) -> str:
        return f"({self.m},{self.n})"


@dataclass(frozen=True)
class FrequencyTable:
    rows: tuple[FrequencyRow, ...]
    description: str = DESCRIPTION
    masses: ComponentMasses | None = None    # masses the frequencies were computed with

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    @property
    def labels(self) -> list[str]:
        return [row.label for row in self.rows]

    @property
    def core(self) -> np.ndarray:
        return np.array([row.core for row in self.rows])

    @property
    def frame(self) -> np.ndarray:
        return np.array([row.frame for row in self.rows])

    @property
    def assembly(self) -> np.ndarray:
        return np.array([row.assembly for row in self.rows])

    def row(self, m: int, n: int) -> FrequencyRow:
        for r in self.rows:
            if r.m == m and r.n == n:
                return r
        raise KeyError(f"No row for mode ({m},{n})")

    def as_dict(self) -> dict:
        return {
            "description": self.description,
            "columns": list(COLUMNS),
            "index": self.labels,
            "data": [[row.core, row.frame, row.assembly] for row in self.rows],
        }

    def to_dataframe(self) -> pd.DataFrame:
        df = pd.DataFrame(
            [[row.core, row.frame, row.assembly] for row in self.rows],
            index=self.labels,
            columns=list(COLUMNS),
        )
        df.attrs["description"] = self.description
        return df


class NaturalFrequencyAnalyzer:
    """
    Natural frequencies of the stator core, the frame and the assembled
    system, each treated as a single DOF per mode:

        f = 1 / (2 pi) * sqrt(K / M)
    """

    def __init__(self,
                 params: MachineParameters,
                 core_model: str = "donnell",
                 axial_orders: Sequence[int] = AXIAL_ORDERS,
                 real_root_tol: float = DEFAULT_REAL_ROOT_TOL):
        if core_model not in CORE_MODELS:
            raise InvalidInputError(
                f"Unknown core model '{core_model}', expected one of {sorted(CORE_MODELS)}")
        self.params = params
        self.core_model = core_model
        self.axial_orders = tuple(axial_orders)
        self.real_root_tol = real_root_tol

    def run(self, radial_orders: Sequence[int]) -> FrequencyTable:
        params = self.params
        radial = [int(m) for m in radial_orders]
        pairs = mode_pairs(radial, self.axial_orders)

        geometry = core_geometry(params)
        masses = component_masses(params, geometry)

        # core stiffness only depends on m
        K_core_radial = CORE_MODELS[self.core_model](params, geometry, radial)
        core_by_order = dict(zip(radial, K_core_radial))
        K_mc = np.array([core_by_order[m] for m, _ in pairs], dtype=float)

        K_mn = frame_stiffness(params,
                               [m for m, _ in pairs],
                               [n for _, n in pairs],
                               self.real_root_tol)

        two_pi = 2.0 * np.pi
        f_core = checked_sqrt(K_mc / masses.M_0, "core frequency") / two_pi
        f_frame = checked_sqrt(K_mn / masses.M_f, "frame frequency") / two_pi
        f_system = checked_sqrt((K_mc + K_mn) / masses.total, "assembly frequency") / two_pi

        rows = tuple(
            FrequencyRow(m=m, n=n, core=float(fc), frame=float(ff), assembly=float(fs))
            for (m, n), fc, ff, fs in zip(pairs, f_core, f_frame, f_system)
        )
        logger.info("Computed %d modes (%d radial x %d axial orders, core model '%s')",
                    len(rows), len(radial), len(self.axial_orders), self.core_model)
        return FrequencyTable(rows=rows, masses=masses)


def natural_frequencies(params: MachineParameters,
                        radial_orders: Sequence[int],
                        **kwargs) -> FrequencyTable:
    return NaturalFrequencyAnalyzer(params, **kwargs).run(radial_orders)
