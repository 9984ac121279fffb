import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from vib_app.config import CONFIG
from vib_app.services import MachineFactory, NaturalFrequencyService
from vib_core.errors import InvalidInputError, RootSelectionError

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{CONFIG.app_name} API",
    description="Natural frequencies of the stator core, frame and assembly",
    version=CONFIG.version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class MachineData(BaseModel):
    """Machine geometry and material data (SI units)."""
    s: int = Field(..., gt=0, description="Number of slots")
    R_so: float = Field(..., description="Stator outer radius (m)")
    R_si: float = Field(..., description="Stator inner radius (m)")
    w_bi: float = Field(..., description="Yoke thickness (m)")
    L: float = Field(..., description="Stack length (m)")
    k_i: float = Field(..., description="Stacking factor")
    d_s: float = Field(..., description="Slot depth (m)")
    w_th: float = Field(..., description="Tooth width (m)")
    rho_c: float = Field(..., description="Core density (kg/m^3)")
    E_plane: float = Field(..., description="Core Young's modulus (Pa)")
    nu_plane: float = Field(..., description="Core Poisson ratio")
    D_f: float = Field(..., description="Frame outer diameter (m)")
    L_f: float = Field(..., description="Frame length (m)")
    h_f: float = Field(..., description="Frame thickness (m)")
    rho_f: float = Field(..., description="Frame density (kg/m^3)")
    E_f: float = Field(..., description="Frame Young's modulus (Pa)")
    nu_f: float = Field(..., description="Frame Poisson ratio")
    rho_w: float = Field(..., description="Winding density (kg/m^3)")


class FrequencyRequest(BaseModel):
    machine: MachineData
    radial_orders: Optional[List[int]] = Field(None, description="Radial orders to evaluate")
    force_orders: Optional[List[int]] = Field(None, description="Leading entry, then the lowest force order and its multiples")
    core_model: Optional[str] = Field(None, description="'donnell' or 'hoppe'")


@app.get("/health")
async def health():
    return {"status": "ok", "version": CONFIG.version}


@app.post("/stator/natural-frequencies")
def calculate_natural_frequencies(request: FrequencyRequest):
    payload = request.model_dump()
    try:
        machine = MachineFactory.create_machine(payload)
        return NaturalFrequencyService().run(machine, payload)
    except InvalidInputError as e:
        logger.warning("Rejected request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except RootSelectionError as e:
        logger.error("Frame root selection failed: %s", e)
        raise HTTPException(status_code=500, detail=f"Solver error: {e}")
