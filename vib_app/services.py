# vib_app/services.py
from __future__ import annotations

from vib_core.errors import InvalidInputError
from vib_core.frequencies import NaturalFrequencyAnalyzer
from vib_core.machine import MachineParameters
from vib_core.modes import radial_orders_from_force_orders

from .config import CONFIG, AppConfig


class MachineFactory:
    @staticmethod
    def create_machine(payload: dict) -> MachineParameters:
        machine = payload.get("machine", payload)
        return MachineParameters.from_dict(machine)


class NaturalFrequencyService:
    def __init__(self, config: AppConfig = CONFIG):
        self.config = config

    @staticmethod
    def radial_orders(payload: dict) -> list[int]:
        if payload.get("radial_orders") is not None:
            return [int(m) for m in payload["radial_orders"]]
        if payload.get("force_orders") is not None:
            return radial_orders_from_force_orders(payload["force_orders"])
        raise InvalidInputError("Either 'radial_orders' or 'force_orders' must be given.")

    def run(self, machine: MachineParameters, payload: dict) -> dict:
        analyzer = NaturalFrequencyAnalyzer(
            machine,
            core_model=payload.get("core_model") or self.config.default_core_model,
            axial_orders=self.config.axial_orders,
            real_root_tol=self.config.real_root_tol,
        )
        table = analyzer.run(self.radial_orders(payload))

        resp = table.as_dict()
        resp["masses"] = table.masses.as_dict()
        resp["core_model"] = analyzer.core_model
        return resp
