"""Info route: exposes runtime configuration to the clients.

GET /api/info returns the current PREFLIGHT_MODE so the UI can decide where
saved scenarios live (server in local mode, device store in cloud mode).
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from preflight.aircraft_data import list_aircraft
from preflight.config import get_mode

router = APIRouter(prefix="/api", tags=["info"])


@router.get("/info")
async def get_info(request: Request) -> dict:
    """Return runtime information about the current deployment.

    Response fields
    ---------------
    mode : str
        ``"local"`` (default) or ``"cloud"``.
    version : str
        Application version string sourced from the FastAPI app metadata.
    aircraftCount : int
        Number of reference aircraft served by /api/aircraft.
    """
    return {
        "mode": get_mode(),
        "version": request.app.version,
        "aircraftCount": len(list_aircraft()),
    }
