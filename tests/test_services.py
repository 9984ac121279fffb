import os
import sys
import numpy as np
import pytest
from fastapi.testclient import TestClient

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from api.main import app
from vib_app.config import AppConfig
from vib_app.services import MachineFactory, NaturalFrequencyService
from vib_core.errors import InvalidInputError


MACHINE = {
    "s": 36, "R_so": 0.1, "w_bi": 0.01, "rho_c": 7650.0, "k_i": 0.95, "L": 0.2,
    "d_s": 0.02, "w_th": 0.005, "E_plane": 200e9, "nu_plane": 0.3, "R_si": 0.07,
    "D_f": 0.25, "L_f": 0.25, "h_f": 0.01, "rho_f": 7850.0, "E_f": 200e9,
    "nu_f": 0.3, "rho_w": 8900.0,
}


@pytest.fixture
def client():
    return TestClient(app)


def test_factory_accepts_nested_or_flat_payload():
    flat = MachineFactory.create_machine(MACHINE)
    nested = MachineFactory.create_machine({"machine": MACHINE})
    assert flat == nested
    assert flat.s == 36


def test_service_with_radial_orders():
    machine = MachineFactory.create_machine(MACHINE)
    result = NaturalFrequencyService().run(machine, {"radial_orders": [0, 1, 2, 3, 4]})

    assert result["columns"] == ["Stator Core", "Frame", "Assembly"]
    assert len(result["index"]) == 15
    assert len(result["data"]) == 15
    assert result["core_model"] == "donnell"
    assert result["masses"]["effective_core"] > result["masses"]["core"]


def test_service_with_force_orders():
    machine = MachineFactory.create_machine(MACHINE)
    result = NaturalFrequencyService().run(machine, {"force_orders": [0, 3, 6]})

    # radial orders 0, 1, 2, 3, 6
    assert len(result["index"]) == 15
    assert result["index"][:5] == ["(0,1)", "(1,1)", "(2,1)", "(3,1)", "(6,1)"]


def test_service_requires_mode_orders():
    machine = MachineFactory.create_machine(MACHINE)
    with pytest.raises(InvalidInputError):
        NaturalFrequencyService().run(machine, {})


def test_service_uses_config_axial_orders():
    machine = MachineFactory.create_machine(MACHINE)
    config = AppConfig(axial_orders=(1, 2))
    result = NaturalFrequencyService(config).run(machine, {"radial_orders": [2, 4]})
    assert result["index"] == ["(2,1)", "(4,1)", "(2,2)", "(4,2)"]


def test_api_natural_frequencies(client):
    response = client.post("/stator/natural-frequencies",
                           json={"machine": MACHINE, "radial_orders": [0, 1, 2, 3, 4]})
    assert response.status_code == 200

    data = response.json()
    assert data["description"] == "Natural frequencies for mode (m,n) in Hz"
    assert len(data["data"]) == 15

    freqs = np.array(data["data"])
    assert np.all(freqs > 0)
    # assembly below the stiffer subsystem in every row
    assert np.all(freqs[:, 2] < np.maximum(freqs[:, 0], freqs[:, 1]))


def test_api_hoppe_model(client):
    response = client.post("/stator/natural-frequencies",
                           json={"machine": MACHINE, "force_orders": [0, 2], "core_model": "hoppe"})
    assert response.status_code == 200
    assert response.json()["core_model"] == "hoppe"


def test_api_rejects_bad_requests(client):
    response = client.post("/stator/natural-frequencies",
                           json={"machine": MACHINE, "radial_orders": [0, 1], "core_model": "nope"})
    assert response.status_code == 400

    response = client.post("/stator/natural-frequencies", json={"machine": MACHINE})
    assert response.status_code == 400

    incomplete = {k: v for k, v in MACHINE.items() if k != "h_f"}
    response = client.post("/stator/natural-frequencies",
                           json={"machine": incomplete, "radial_orders": [0]})
    assert response.status_code == 422


def test_api_reports_root_selection_failure(client, monkeypatch):
    monkeypatch.setattr("vib_core.shell.cubic_roots",
                        lambda C2, C1, C0: np.array([1.0 + 0.5j, 1.0 - 0.5j]))

    response = client.post("/stator/natural-frequencies",
                           json={"machine": MACHINE, "radial_orders": [0, 1]})
    assert response.status_code == 500
    assert "Mode (0,1)" in response.json()["detail"]


def test_service_returns_masses_of_the_run():
    machine = MachineFactory.create_machine(MACHINE)
    result = NaturalFrequencyService().run(machine, {"radial_orders": [0]})

    masses = result["masses"]
    assert np.isclose(masses["effective_core"], masses["core"] + masses["teeth"])
    assert masses["frame"] > 0


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
