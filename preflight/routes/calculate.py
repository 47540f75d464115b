"""POST /api/calculate: REST entry point for the weight & balance engine.

Clients normally recompute locally on every input change; this endpoint (and
the /ws/calculate channel) serve clients that defer to the server copy of
the engine, and let the golden-value suite be checked over HTTP.

Unknown station/tank ids are caller bugs: they are logged and returned as
422 with the offending id, never defaulted to zero.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from preflight.aircraft_data import get_aircraft
from preflight.calculator import UnknownEntityError, calculate, calculate_landing
from preflight.models import (
    Aircraft,
    CalculationResult,
    LandingRequest,
    LandingResponse,
    LoadingScenario,
)

logger = logging.getLogger("preflight.calculate")

router = APIRouter(prefix="/api", tags=["calculate"])


def _require_aircraft(aircraft_id: str) -> Aircraft:
    aircraft = get_aircraft(aircraft_id)
    if aircraft is None:
        raise HTTPException(status_code=404, detail=f"Aircraft not found: {aircraft_id}")
    return aircraft


def _contract_violation(exc: UnknownEntityError) -> HTTPException:
    logger.warning("Scenario references unknown %s: %s", exc.kind, exc)
    return HTTPException(
        status_code=422,
        detail={"error": f"Unknown {exc.kind}", "id": exc.entity_id, "aircraftId": exc.aircraft_id},
    )


@router.post("/calculate", response_model=CalculationResult, response_model_by_alias=True)
async def calculate_scenario(scenario: LoadingScenario) -> CalculationResult:
    """Compute totals, CG, limit checks and warnings for one scenario."""
    aircraft = _require_aircraft(scenario.aircraft_id)
    try:
        return calculate(aircraft, scenario.station_loads, scenario.fuel_loads)
    except UnknownEntityError as exc:
        raise _contract_violation(exc) from exc


@router.post("/calculate/landing", response_model=LandingResponse, response_model_by_alias=True)
async def calculate_landing_scenario(request: LandingRequest) -> LandingResponse:
    """Takeoff result plus the landing projection for the given per-tank burn.

    ``landing`` is null when no fuel burn is specified.
    """
    aircraft = _require_aircraft(request.aircraft_id)
    try:
        takeoff = calculate(aircraft, request.station_loads, request.fuel_loads)
        landing = calculate_landing(
            aircraft, request.station_loads, request.fuel_loads, request.fuel_burn
        )
    except UnknownEntityError as exc:
        raise _contract_violation(exc) from exc
    return LandingResponse(takeoff=takeoff, landing=landing)
