"""Weight & balance accumulator: folds a loading scenario onto an aircraft.

Safety-critical, pure and side-effect free: no I/O, no logging, no state
kept between calls. Detail text uses the iOS client's number formatting
(whole-number loads, one-decimal totals, grouped limits); tests/preflight/golden/
pins literal outputs so changes to either arithmetic or wording show up.

Provides:
  - calculate(): totals, CG, limit checks and graded warnings
  - calculate_landing(): re-runs calculate() after a per-tank fuel burn
  - UnknownStationError / UnknownFuelTankError: caller-contract violations

Warning emission order is part of the contract:
  1. per-station and per-tank warnings, in input order
  2. aggregate weight warnings (gross, ramp, landing)
  3. CG warnings (envelope, near limit)

Data problems (negative or excessive loads, over-limit totals) are never
rejected or clamped; they only produce warnings.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from preflight.envelope import EnvelopeLimits, get_limits_at_weight, is_point_in_envelope
from preflight.models import (
    Aircraft,
    CalculationResult,
    CalculationWarning,
    FuelDetail,
    FuelLoad,
    FuelTank,
    LandingResult,
    Station,
    StationDetail,
    StationLoad,
)

# Remaining margin below which NEAR_MAX_GROSS is raised, as a fraction of max gross.
NEAR_MAX_GROSS_FRACTION = 0.05

# Distance to either envelope limit (inches) below which CG_NEAR_LIMIT is raised.
CG_NEAR_LIMIT_IN = 1.0

# 14 CFR 91.103, Preflight action.
PREFLIGHT_ACTION_REF = "FAR 91.103"

# Separators used in warning detail text.
EM_DASH = "\u2014"
EN_DASH = "\u2013"


# ---------------------------------------------------------------------------
# Caller-contract violations
# ---------------------------------------------------------------------------


class UnknownEntityError(LookupError):
    """A scenario references a station or tank the aircraft does not define.

    This is a bug in whoever built the scenario (e.g. loads from one aircraft
    applied to another). It is never recovered from inside the engine.
    """

    kind = "entity"

    def __init__(self, entity_id: str, aircraft_id: str) -> None:
        self.entity_id = entity_id
        self.aircraft_id = aircraft_id
        super().__init__(f"Unknown {self.kind} {entity_id!r} for aircraft {aircraft_id!r}")


class UnknownStationError(UnknownEntityError):
    kind = "station"


class UnknownFuelTankError(UnknownEntityError):
    kind = "fuel tank"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


_Entity = TypeVar("_Entity", Station, FuelTank)


def _first_by_id(items: Iterable[_Entity]) -> dict[str, _Entity]:
    """Index by id; the first definition wins if an id repeats."""
    index: dict[str, _Entity] = {}
    for item in items:
        index.setdefault(item.id, item)
    return index


def _whole(value: float) -> str:
    """Load or capacity rounded to a whole number: 150.5 -> '150'."""
    return f"{value:.0f}"


def _grouped(value: float) -> str:
    """Published limit with thousands separators: 7448.0 -> '7,448'."""
    return f"{value:,.0f}"


def _cg_limit_detail(aircraft: Aircraft, cg: float, weight: float,
                     limits: EnvelopeLimits | None) -> str:
    if limits is not None:
        limit_text = (
            f'forward limit: {limits.forward:.1f}" / aft limit: {limits.aft:.1f}" '
            f"at {weight:.0f} lbs"
        )
    else:
        limit_text = (
            f"approved range: {_whole(aircraft.cg_range.forward)}{EN_DASH}"
            f"{_whole(aircraft.cg_range.aft)} in"
        )
    return f"CG at {cg:.2f} in {EM_DASH} {limit_text}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate(
    aircraft: Aircraft,
    station_loads: Iterable[StationLoad],
    fuel_loads: Iterable[FuelLoad],
) -> CalculationResult:
    """Perform a complete weight and balance calculation.

    Args:
        aircraft: Reference specification (read-only).
        station_loads: Weight per station, in display order.
        fuel_loads: Gallons per tank, in display order.

    Returns:
        A new CalculationResult. Identical inputs always give identical results.

    Raises:
        UnknownStationError: a load references a station id not on the aircraft.
        UnknownFuelTankError: a load references a tank id not on the aircraft.
    """
    warnings: list[CalculationWarning] = []
    stations = _first_by_id(aircraft.stations)
    tanks = _first_by_id(aircraft.fuel_tanks)

    # ── 1. Empty aircraft ─────────────────────────────────────────────
    total_weight = aircraft.empty_weight
    total_moment = aircraft.empty_weight * aircraft.empty_weight_arm

    # ── 2. Station loads ──────────────────────────────────────────────
    station_details: list[StationDetail] = []
    for load in station_loads:
        station = stations.get(load.station_id)
        if station is None:
            raise UnknownStationError(load.station_id, aircraft.id)

        arm = station.arm
        moment = load.weight * arm

        if load.weight < 0:
            warnings.append(CalculationWarning(
                level="danger",
                code="NEGATIVE_WEIGHT",
                message=f"{station.name} has negative weight",
                detail="Weight values must be zero or positive",
            ))

        if station.max_weight is not None and load.weight > station.max_weight:
            warnings.append(CalculationWarning(
                level="danger",
                code="STATION_OVERWEIGHT",
                message=f"{station.name} exceeds maximum weight",
                detail=(
                    f"{_whole(load.weight)} lbs exceeds limit of "
                    f"{_whole(station.max_weight)} lbs"
                ),
            ))

        total_weight += load.weight
        total_moment += moment

        station_details.append(StationDetail(
            station_id=load.station_id,
            name=station.name,
            weight=load.weight,
            arm=arm,
            moment=moment,
        ))

    # ── 3. Fuel loads ─────────────────────────────────────────────────
    fuel_details: list[FuelDetail] = []
    for load in fuel_loads:
        tank = tanks.get(load.tank_id)
        if tank is None:
            raise UnknownFuelTankError(load.tank_id, aircraft.id)

        if load.gallons < 0:
            warnings.append(CalculationWarning(
                level="danger",
                code="NEGATIVE_FUEL",
                message=f"{tank.name} has negative fuel",
                detail="Fuel values must be zero or positive",
            ))

        if load.gallons > tank.max_gallons:
            warnings.append(CalculationWarning(
                level="danger",
                code="FUEL_OVERCAPACITY",
                message=f"{tank.name} exceeds fuel capacity",
                detail=(
                    f"{_whole(load.gallons)} gal exceeds maximum of "
                    f"{_whole(tank.max_gallons)} gal"
                ),
            ))

        weight = load.gallons * tank.fuel_weight_per_gallon
        arm = tank.arm
        moment = weight * arm

        total_weight += weight
        total_moment += moment

        fuel_details.append(FuelDetail(
            tank_id=load.tank_id,
            name=tank.name,
            gallons=load.gallons,
            weight=weight,
            arm=arm,
            moment=moment,
        ))

    # ── 4-8. CG, margins, envelope ────────────────────────────────────
    cg = total_moment / total_weight if total_weight > 0 else 0.0

    max_gross = aircraft.max_gross_weight
    is_within_weight_limit = total_weight <= max_gross
    weight_margin = max_gross - total_weight

    cg_forward_margin = cg - aircraft.cg_range.forward
    cg_aft_margin = aircraft.cg_range.aft - cg

    is_within_cg_envelope = is_point_in_envelope(total_weight, cg, aircraft.cg_envelope)
    is_within_all_station_limits = not any(w.code == "STATION_OVERWEIGHT" for w in warnings)

    # ── 9. Weight warnings ────────────────────────────────────────────
    if not is_within_weight_limit:
        warnings.append(CalculationWarning(
            level="danger",
            code="OVER_MAX_GROSS",
            message="Aircraft exceeds maximum takeoff weight",
            detail=(
                f"{total_weight:.1f} lbs exceeds limit of {_grouped(max_gross)} lbs "
                f"by {total_weight - max_gross:.1f} lbs"
            ),
            regulatory_ref=PREFLIGHT_ACTION_REF,
        ))
    elif weight_margin < max_gross * NEAR_MAX_GROSS_FRACTION:
        warnings.append(CalculationWarning(
            level="caution",
            code="NEAR_MAX_GROSS",
            message="Approaching maximum takeoff weight",
            detail=(
                f"{weight_margin:.1f} lbs remaining "
                f"({weight_margin / max_gross * 100:.1f}% margin)"
            ),
        ))

    if aircraft.max_ramp_weight is not None and total_weight > aircraft.max_ramp_weight:
        max_ramp = aircraft.max_ramp_weight
        warnings.append(CalculationWarning(
            level="danger",
            code="OVER_MAX_RAMP",
            message="Aircraft exceeds maximum ramp weight",
            detail=(
                f"{total_weight:.1f} lbs exceeds ramp limit of {_grouped(max_ramp)} lbs "
                f"by {total_weight - max_ramp:.1f} lbs"
            ),
        ))

    # Landing weight is a planning concern at this point, not a takeoff violation.
    if aircraft.max_landing_weight is not None and total_weight > aircraft.max_landing_weight:
        warnings.append(CalculationWarning(
            level="warning",
            code="OVER_MAX_LANDING",
            message="Current weight exceeds max landing weight",
            detail=(
                f"{total_weight:.1f} lbs exceeds landing limit of "
                f"{_grouped(aircraft.max_landing_weight)} lbs {EM_DASH} plan fuel burn before landing"
            ),
        ))

    # ── 10. CG warnings ───────────────────────────────────────────────
    limits = get_limits_at_weight(total_weight, aircraft.cg_envelope)
    if not is_within_cg_envelope:
        warnings.append(CalculationWarning(
            level="danger",
            code="CG_OUT_OF_ENVELOPE",
            message="Center of gravity outside approved envelope",
            detail=_cg_limit_detail(aircraft, cg, total_weight, limits),
            regulatory_ref=PREFLIGHT_ACTION_REF,
        ))
    elif limits is not None and (
        cg - limits.forward < CG_NEAR_LIMIT_IN or limits.aft - cg < CG_NEAR_LIMIT_IN
    ):
        warnings.append(CalculationWarning(
            level="caution",
            code="CG_NEAR_LIMIT",
            message="CG is near envelope boundary",
            detail=(
                f'CG at {cg:.2f} in {EM_DASH} forward limit: {limits.forward:.1f}" / '
                f'aft limit: {limits.aft:.1f}" at this weight'
            ),
        ))

    return CalculationResult(
        total_weight=total_weight,
        total_moment=total_moment,
        cg=cg,
        is_within_weight_limit=is_within_weight_limit,
        is_within_cg_envelope=is_within_cg_envelope,
        is_within_all_station_limits=is_within_all_station_limits,
        weight_margin=weight_margin,
        cg_forward_margin=cg_forward_margin,
        cg_aft_margin=cg_aft_margin,
        station_details=tuple(station_details),
        fuel_details=tuple(fuel_details),
        warnings=tuple(warnings),
    )


def calculate_landing(
    aircraft: Aircraft,
    station_loads: Sequence[StationLoad],
    fuel_loads: Sequence[FuelLoad],
    fuel_burn: Sequence[FuelLoad],
) -> LandingResult | None:
    """Project weight and balance at landing after a per-tank fuel burn.

    The caller decides which tanks the trip fuel comes from; *fuel_burn*
    gives gallons burned per tank id. Remaining fuel (loaded minus burned)
    is run through calculate() unchanged, so landing totals obey exactly the
    same arithmetic as takeoff totals.

    Returns:
        LandingResult with landing-specific warnings only (the takeoff
        warnings stay on the takeoff result), or None when no fuel burn is
        specified.

    Raises:
        UnknownFuelTankError: a burn references a tank not on the aircraft.
        UnknownStationError / UnknownFuelTankError: from calculate().
    """
    tanks = _first_by_id(aircraft.fuel_tanks)
    warnings: list[CalculationWarning] = []

    burned: dict[str, float] = {}
    for burn in fuel_burn:
        tank = tanks.get(burn.tank_id)
        if tank is None:
            raise UnknownFuelTankError(burn.tank_id, aircraft.id)
        if burn.gallons < 0:
            warnings.append(CalculationWarning(
                level="danger",
                code="NEGATIVE_FUEL_BURN",
                message=f"{tank.name} has negative fuel burn",
                detail="Fuel burn values must be zero or positive",
            ))
        burned[burn.tank_id] = burned.get(burn.tank_id, 0.0) + burn.gallons

    if all(burn.gallons == 0 for burn in fuel_burn):
        return None

    loaded: dict[str, float] = {}
    last_entry: dict[str, int] = {}
    for index, load in enumerate(fuel_loads):
        loaded[load.tank_id] = loaded.get(load.tank_id, 0.0) + load.gallons
        last_entry[load.tank_id] = index

    for tank_id, gallons in burned.items():
        available = loaded.get(tank_id, 0.0)
        if gallons > available:
            warnings.append(CalculationWarning(
                level="danger",
                code="FUEL_BURN_EXCEEDS_LOAD",
                message=f"{tanks[tank_id].name} burn exceeds fuel on board",
                detail=f"{_whole(gallons)} gal burned from {_whole(available)} gal loaded",
            ))

    # A tank's burn drains its load entries in order, each down to empty; the
    # last entry takes whatever is left, so only a real deficit goes negative.
    # Burns from tanks that were never loaded are appended as negative loads.
    pending = dict(burned)
    landing_fuel: list[FuelLoad] = []
    for index, load in enumerate(fuel_loads):
        remaining = pending.get(load.tank_id, 0.0)
        if index == last_entry[load.tank_id]:
            taken = pending.pop(load.tank_id, 0.0)
        elif remaining > 0:
            taken = min(max(load.gallons, 0.0), remaining)
            pending[load.tank_id] = remaining - taken
        else:
            taken = 0.0
        landing_fuel.append(FuelLoad(tank_id=load.tank_id, gallons=load.gallons - taken))
    for tank_id, burn in pending.items():
        landing_fuel.append(FuelLoad(tank_id=tank_id, gallons=-burn))

    result = calculate(aircraft, station_loads, landing_fuel)

    max_landing = (
        aircraft.max_landing_weight
        if aircraft.max_landing_weight is not None
        else aircraft.max_gross_weight
    )
    landing_weight = result.total_weight
    is_within_weight_limit = landing_weight <= max_landing

    if not is_within_weight_limit:
        warnings.append(CalculationWarning(
            level="danger",
            code="OVER_MAX_LANDING",
            message="Landing weight exceeds maximum landing weight",
            detail=(
                f"{landing_weight:.1f} lbs at landing exceeds limit of "
                f"{_grouped(max_landing)} lbs by {landing_weight - max_landing:.1f} lbs"
            ),
        ))

    if not result.is_within_cg_envelope:
        limits = get_limits_at_weight(landing_weight, aircraft.cg_envelope)
        warnings.append(CalculationWarning(
            level="danger",
            code="CG_OUT_OF_ENVELOPE",
            message="Landing CG outside approved envelope",
            detail=_cg_limit_detail(aircraft, result.cg, landing_weight, limits),
            regulatory_ref=PREFLIGHT_ACTION_REF,
        ))

    return LandingResult(
        fuel_burn_gallons=sum(burn.gallons for burn in fuel_burn),
        landing_weight=landing_weight,
        landing_moment=result.total_moment,
        landing_cg=result.cg,
        max_landing_weight=max_landing,
        landing_weight_margin=max_landing - landing_weight,
        is_within_weight_limit=is_within_weight_limit,
        is_within_cg_envelope=result.is_within_cg_envelope,
        result=result,
        warnings=tuple(warnings),
    )
