"""Health check endpoint."""
import time
from fastapi import APIRouter

from flywheel.api.schemas import HealthResponse

router = APIRouter()


@router.get("/healthz", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(ok=True, ts=int(time.time() * 1000))
