"""Pydantic models: shared contract between the engine, data and routes.

API Naming Contract:
  - Python code uses snake_case field names.
  - Clients (web and iOS) exchange camelCase JSON, so every model inherits
    CamelModel (alias_generator=to_camel). model.model_dump(by_alias=True)
    produces camelCase keys and populate_by_name=True accepts either form.
  - The one irregular key is isWithinCGEnvelope, which keeps the upper-case
    "CG" used by the clients and is declared with an explicit alias.

Aircraft reference data and calculation results are frozen: a single
Aircraft instance is shared by every concurrent calculation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Enum / Literal Types
# ---------------------------------------------------------------------------

AircraftCategory = Literal["single-engine", "multi-engine"]
SourceConfidence = Literal["high", "medium", "low"]
WarningLevel = Literal["caution", "warning", "danger"]
WarningCode = Literal[
    "NEGATIVE_WEIGHT",
    "NEGATIVE_FUEL",
    "STATION_OVERWEIGHT",
    "FUEL_OVERCAPACITY",
    "OVER_MAX_GROSS",
    "NEAR_MAX_GROSS",
    "OVER_MAX_RAMP",
    "OVER_MAX_LANDING",
    "CG_OUT_OF_ENVELOPE",
    "CG_NEAR_LIMIT",
    # Landing projection only
    "NEGATIVE_FUEL_BURN",
    "FUEL_BURN_EXCEEDS_LOAD",
]

# caution < warning < danger; used by clients to sort alerts by severity.
WARNING_SEVERITY: dict[str, int] = {"caution": 0, "warning": 1, "danger": 2}


# ---------------------------------------------------------------------------
# Base models for camelCase serialization
# ---------------------------------------------------------------------------

class CamelModel(BaseModel):
    """Base for models exchanged with clients using camelCase keys."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class FrozenCamelModel(CamelModel):
    """Immutable variant for reference data and results."""

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel, frozen=True)


# ---------------------------------------------------------------------------
# Aircraft specification (immutable reference data)
# ---------------------------------------------------------------------------

class EnvelopePoint(FrozenCamelModel):
    """Vertex of the CG envelope polygon (x = cg, y = weight)."""

    weight: float
    cg: float


class CGRange(FrozenCamelModel):
    """Static forward/aft CG bounds, used as a display fallback only."""

    forward: float
    aft: float


class Station(FrozenCamelModel):
    """A loading station (seat row, baggage area)."""

    id: str
    name: str
    arm: float  # inches aft of datum
    max_weight: float | None = None
    default_weight: float | None = None


class FuelTank(FrozenCamelModel):
    """A fuel tank (or a symmetric pair of tanks treated as one)."""

    id: str
    name: str
    arm: float
    max_gallons: float
    fuel_weight_per_gallon: float
    is_optional: bool = False


class RegulatoryInfo(FrozenCamelModel):
    """FAA type certificate reference for the airframe."""

    tcds_number: str
    far_basis: str


class PrimarySource(FrozenCamelModel):
    """The document a published figure is taken from."""

    document: str
    section: str
    publisher: str
    date_published: str  # ISO date
    tcds_number: str | None = None
    url: str | None = None


class SecondarySource(FrozenCamelModel):
    """An independent document that confirms (or qualifies) the primary one."""

    document: str
    section: str | None = None
    publisher: str | None = None
    verification: str
    date_verified: str | None = None


class SourceAttribution(FrozenCamelModel):
    """Provenance of one reference figure, shown next to it in the clients."""

    primary: PrimarySource
    secondary: SecondarySource | None = None
    confidence: SourceConfidence
    last_verified: str  # ISO date
    notes: str | None = None


class Aircraft(FrozenCamelModel):
    """Complete aircraft specification. Weights in lbs, arms in inches.

    ``sources`` maps a figure's camelCase path to where it came from:
    top-level figures by name ("emptyWeight", "cgRange.forward",
    "cgEnvelope"), station and tank figures by id
    ("stations.front-seats.arm", "fuelTanks.main-fuel.maxGallons").
    The engine never reads it.
    """

    id: str
    name: str
    model: str = ""
    manufacturer: str = ""
    year: str | None = None
    category: AircraftCategory = "single-engine"

    # ── Weights & limits ──────────────────────────────────────────────
    empty_weight: float
    empty_weight_arm: float
    max_gross_weight: float
    max_ramp_weight: float | None = None
    max_landing_weight: float | None = None
    useful_load: float = 0.0  # informational only

    # ── Balance ───────────────────────────────────────────────────────
    datum: str = ""
    cg_range: CGRange
    cg_envelope: tuple[EnvelopePoint, ...] = ()

    # ── Loading ───────────────────────────────────────────────────────
    stations: tuple[Station, ...] = ()
    fuel_tanks: tuple[FuelTank, ...] = ()

    regulatory: RegulatoryInfo | None = None
    sources: dict[str, SourceAttribution] = Field(default_factory=dict)


class AircraftSummary(CamelModel):
    """Summary for aircraft listing (GET /api/aircraft)."""

    id: str
    name: str
    model: str
    manufacturer: str
    category: AircraftCategory


# ---------------------------------------------------------------------------
# Loading scenario, built per calculation from current input state
# ---------------------------------------------------------------------------

class StationLoad(FrozenCamelModel):
    """Weight entered at a single station. Negative values are accepted and warned."""

    station_id: str
    weight: float


class FuelLoad(FrozenCamelModel):
    """Gallons in a single tank (or burned from it, for landing projections)."""

    tank_id: str
    gallons: float


class LoadingScenario(CamelModel):
    """Request body for POST /api/calculate and each /ws/calculate message."""

    aircraft_id: str
    station_loads: list[StationLoad] = Field(default_factory=list)
    fuel_loads: list[FuelLoad] = Field(default_factory=list)


class LandingRequest(LoadingScenario):
    """Request body for POST /api/calculate/landing.

    fuel_burn lists the gallons burned per tank. How a trip's fuel is split
    across tanks is a pilot decision, so it is always supplied explicitly.
    """

    fuel_burn: list[FuelLoad] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Calculation output
# ---------------------------------------------------------------------------

class StationDetail(FrozenCamelModel):
    station_id: str
    name: str
    weight: float
    arm: float
    moment: float


class FuelDetail(FrozenCamelModel):
    tank_id: str
    name: str
    gallons: float
    weight: float
    arm: float
    moment: float


class CalculationWarning(FrozenCamelModel):
    """Graded, non-blocking safety warning."""

    level: WarningLevel
    code: WarningCode
    message: str
    detail: str | None = None
    regulatory_ref: str | None = None


class CalculationResult(FrozenCamelModel):
    """Totals, limit checks and warnings for one loading scenario."""

    total_weight: float
    total_moment: float
    cg: float

    is_within_weight_limit: bool
    is_within_cg_envelope: bool = Field(alias="isWithinCGEnvelope")
    is_within_all_station_limits: bool

    weight_margin: float
    cg_forward_margin: float
    cg_aft_margin: float

    station_details: tuple[StationDetail, ...] = ()
    fuel_details: tuple[FuelDetail, ...] = ()

    warnings: tuple[CalculationWarning, ...] = ()

    def has_warning(self, code: str) -> bool:
        return any(w.code == code for w in self.warnings)


class LandingResult(FrozenCamelModel):
    """Projected weight and balance after the planned fuel burn."""

    fuel_burn_gallons: float
    landing_weight: float
    landing_moment: float
    landing_cg: float
    max_landing_weight: float
    landing_weight_margin: float
    is_within_weight_limit: bool
    is_within_cg_envelope: bool = Field(alias="isWithinCGEnvelope")
    result: CalculationResult
    warnings: tuple[CalculationWarning, ...] = ()


# ---------------------------------------------------------------------------
# REST Response Types
# ---------------------------------------------------------------------------

class LandingResponse(CamelModel):
    """Response from POST /api/calculate/landing."""

    takeoff: CalculationResult
    landing: LandingResult | None = None


class EnvelopeLimitsResponse(CamelModel):
    """Response from GET /api/aircraft/{id}/envelope/limits."""

    weight: float
    forward: float | None = None
    aft: float | None = None
    within_span: bool


class EnvelopeContainsResponse(CamelModel):
    """Response from GET /api/aircraft/{id}/envelope/contains."""

    weight: float
    cg: float
    inside: bool
