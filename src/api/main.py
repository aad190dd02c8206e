"""
Local API for hardware readiness assessments.

Endpoints:
- GET  /health                  liveness
- GET  /v1/system/assessment    probe this machine and assess it
- POST /v1/assessment           assess a caller-supplied inventory
"""

import time
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, StrictFloat, StrictInt

from src.schemas.hardware import HardwareInventory, CpuInfo, RamInfo, GpuInfo, DiskInfo, InvalidInventory
from src.services.assessment_service import AssessmentService
from src.utils.logger import log

assessment_service = AssessmentService()

app = FastAPI(
    title="AI Readiness Local API",
    description="Scores local hardware for AI/ML workloads.",
    version="1.0.0"
)


# --- Request Models ---

# Strict numbers: JSON booleans must not be coerced into counts or sizes.

class CpuIn(BaseModel):
    cores: StrictInt
    logical_processors: StrictInt
    max_clock_ghz: StrictFloat
    name: str = "Unknown"


class RamIn(BaseModel):
    total_gb: StrictFloat


class GpuIn(BaseModel):
    name: str
    vram_gb: StrictFloat


class DiskIn(BaseModel):
    free_gb: StrictFloat
    total_gb: StrictFloat = 0.0
    path: str = ""


class InventoryIn(BaseModel):
    cpu: Optional[CpuIn] = None
    ram: Optional[RamIn] = None
    gpus: List[GpuIn] = Field(default_factory=list)
    disk: Optional[DiskIn] = None

    def to_inventory(self) -> HardwareInventory:
        """Raises InvalidInventory for values that parse but are out of range."""
        return HardwareInventory(
            cpu=CpuInfo(**self.cpu.model_dump()) if self.cpu else None,
            ram=RamInfo(**self.ram.model_dump()) if self.ram else None,
            gpus=tuple(GpuInfo(**g.model_dump()) for g in self.gpus),
            disk=DiskInfo(**self.disk.model_dump()) if self.disk else None,
        )


# --- Endpoints ---

@app.get("/health", tags=["System"])
async def health_check():
    """Verify API is alive."""
    return {"status": "ok", "timestamp": time.time(), "agent": "AI Readiness"}


@app.get("/v1/system/assessment", tags=["Assessment"])
def assess_this_system():
    """Probe the local machine and return its assessment."""
    inventory, result = assessment_service.assess_current_system()
    return {
        "missing_categories": list(inventory.missing_categories),
        "gpu_count": len(inventory.gpus),
        "assessment": result.to_dict(),
    }


@app.post("/v1/assessment", tags=["Assessment"])
def assess_inventory(body: InventoryIn):
    """Assess a supplied inventory; out-of-range values are rejected with 422."""
    try:
        inventory = body.to_inventory()
    except InvalidInventory as e:
        log.warning(f"Rejected inventory: {e}")
        raise HTTPException(
            status_code=422,
            detail=str(e),
        )
    return assessment_service.assess(inventory).to_dict()
