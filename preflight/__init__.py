"""Weight & balance engine -- public API re-exports.

Usage::

    from preflight import calculate, get_aircraft, StationLoad, FuelLoad

    result = calculate(
        get_aircraft("cessna-172m"),
        [StationLoad(station_id="front-seats", weight=340)],
        [FuelLoad(tank_id="main-fuel", gallons=40)],
    )
"""

from __future__ import annotations

from preflight.aircraft_data import get_aircraft, list_aircraft
from preflight.calculator import (
    UnknownEntityError,
    UnknownFuelTankError,
    UnknownStationError,
    calculate,
    calculate_landing,
)
from preflight.envelope import EnvelopeLimits, get_limits_at_weight, is_point_in_envelope
from preflight.models import (
    Aircraft,
    CalculationResult,
    CalculationWarning,
    EnvelopePoint,
    FuelLoad,
    LandingResult,
    StationLoad,
)

__all__ = [
    "Aircraft",
    "CalculationResult",
    "CalculationWarning",
    "EnvelopeLimits",
    "EnvelopePoint",
    "FuelLoad",
    "LandingResult",
    "StationLoad",
    "UnknownEntityError",
    "UnknownFuelTankError",
    "UnknownStationError",
    "calculate",
    "calculate_landing",
    "get_aircraft",
    "get_limits_at_weight",
    "is_point_in_envelope",
    "list_aircraft",
]
