"""Health check endpoint."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cicd_api.api.deps import get_clock
from cicd_api.core.clock import ProcessClock

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: str
    uptime: float


@router.get("/api/health", response_model=HealthResponse)
def health_check(clock: ProcessClock = Depends(get_clock)):
    """
    Report liveness with the current time and process uptime.

    Returns:
        status "ok", ISO-8601 timestamp of this call, uptime in seconds
    """
    return HealthResponse(status="ok", timestamp=clock.timestamp(), uptime=clock.uptime())
