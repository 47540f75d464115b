"""Aircraft reference data routes: GET /api/aircraft and envelope queries.

The envelope endpoints let the chart draw the weight-dependent CG limits and
place arbitrary points without running a full calculation.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query

from preflight.aircraft_data import get_aircraft, list_aircraft
from preflight.envelope import get_limits_at_weight, is_point_in_envelope
from preflight.models import (
    Aircraft,
    AircraftSummary,
    EnvelopeContainsResponse,
    EnvelopeLimitsResponse,
)

router = APIRouter(prefix="/api/aircraft", tags=["aircraft"])


def _require_aircraft(aircraft_id: str) -> Aircraft:
    aircraft = get_aircraft(aircraft_id)
    if aircraft is None:
        raise HTTPException(status_code=404, detail=f"Aircraft not found: {aircraft_id}")
    return aircraft


@router.get("", response_model=list[AircraftSummary], response_model_by_alias=True)
async def list_all() -> list[AircraftSummary]:
    """Return summaries of all reference aircraft in display order."""
    return [
        AircraftSummary(
            id=a.id,
            name=a.name,
            model=a.model,
            manufacturer=a.manufacturer,
            category=a.category,
        )
        for a in list_aircraft()
    ]


@router.get("/{aircraft_id}", response_model=Aircraft, response_model_by_alias=True)
async def get_one(aircraft_id: str) -> Aircraft:
    """Return the full specification for one aircraft."""
    return _require_aircraft(aircraft_id)


@router.get(
    "/{aircraft_id}/envelope/limits",
    response_model=EnvelopeLimitsResponse,
    response_model_by_alias=True,
)
async def envelope_limits(
    aircraft_id: str,
    weight: float = Query(..., description="Aircraft weight in lbs"),
) -> EnvelopeLimitsResponse:
    """Forward/aft CG limits at *weight*; both null outside the envelope span."""
    aircraft = _require_aircraft(aircraft_id)
    limits = get_limits_at_weight(weight, aircraft.cg_envelope)
    if limits is None:
        return EnvelopeLimitsResponse(weight=weight, within_span=False)
    return EnvelopeLimitsResponse(
        weight=weight,
        forward=limits.forward,
        aft=limits.aft,
        within_span=True,
    )


@router.get(
    "/{aircraft_id}/envelope/contains",
    response_model=EnvelopeContainsResponse,
    response_model_by_alias=True,
)
async def envelope_contains(
    aircraft_id: str,
    weight: float = Query(..., description="Aircraft weight in lbs"),
    cg: float = Query(..., description="CG in inches aft of datum"),
) -> EnvelopeContainsResponse:
    """Whether the (weight, cg) point lies inside the approved envelope."""
    aircraft = _require_aircraft(aircraft_id)
    return EnvelopeContainsResponse(
        weight=weight,
        cg=cg,
        inside=is_point_in_envelope(weight, cg, aircraft.cg_envelope),
    )
