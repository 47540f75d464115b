"""
preflight/aircraft_data.py

Reference aircraft specifications served to clients and used by the tests.

Values come from the type certificate data sheets and each airframe's POH
weight & balance section. Empty weights and arms are TYPICAL figures except
for the Chieftain, which is N800LP's own weighing record; pilots must use
their aircraft's current W&B record. Envelopes are simplified to the key
vertices of the POH loading chart.

Every figure carries its source in ``Aircraft.sources`` so the clients can
show where a number came from and how confident we are in it.

Usage:
    from preflight.aircraft_data import get_aircraft, list_aircraft
    cessna = get_aircraft("cessna-172m")
"""

from __future__ import annotations

from preflight.models import (
    Aircraft,
    CGRange,
    EnvelopePoint,
    FuelTank,
    PrimarySource,
    RegulatoryInfo,
    SecondarySource,
    SourceAttribution,
    SourceConfidence,
    Station,
)

# 100LL avgas, lbs per US gallon
AVGAS_LBS_PER_GAL = 6.0

# Date the handbook-derived figures were last checked against their documents.
HANDBOOK_VERIFIED = "2024-02-08"


def _envelope(*points: tuple[float, float]) -> tuple[EnvelopePoint, ...]:
    """Build an envelope from (weight, cg) pairs."""
    return tuple(EnvelopePoint(weight=w, cg=cg) for w, cg in points)


def _cited(
    primary: PrimarySource,
    section: str | None = None,
    *,
    confidence: SourceConfidence = "high",
    verified: str = HANDBOOK_VERIFIED,
    notes: str | None = None,
    secondary: SecondarySource | None = None,
) -> SourceAttribution:
    """Attribute a figure to *primary*, optionally narrowed to one *section*."""
    if section is not None:
        primary = primary.model_copy(update={"section": section})
    return SourceAttribution(
        primary=primary,
        secondary=secondary,
        confidence=confidence,
        last_verified=verified,
        notes=notes,
    )


def _per_station(
    station_ids: tuple[str, ...], source: SourceAttribution
) -> dict[str, SourceAttribution]:
    return {f"stations.{sid}.arm": source for sid in station_ids}


def _tcds(number: str, date_published: str = "2024-01-15") -> PrimarySource:
    return PrimarySource(
        document=f"FAA Type Certificate Data Sheet {number}",
        section="Limitations",
        publisher="FAA Aircraft Certification Office",
        date_published=date_published,
        tcds_number=number,
    )


def _gross_confirmed(weight: str) -> SecondarySource:
    return SecondarySource(
        document="POH Section 2, Limitations",
        verification=f"Confirms TCDS value of {weight} lbs",
    )


# --------------------------------------------------------------------------
# Cessna 172M Skyhawk, TCDS 3A12, POH D1016-13
# --------------------------------------------------------------------------
_C172_POH = PrimarySource(
    document="POH D1016-13, Cessna Model 172M Skyhawk",
    section="Section 6 - Weight & Balance",
    publisher="Cessna Aircraft Company",
    date_published="1975-01-01",
)
_C172_TCDS = _tcds("3A12")

CESSNA_172M = Aircraft(
    id="cessna-172m",
    name="Cessna 172M Skyhawk",
    model="172M",
    manufacturer="Cessna Aircraft Company",
    year="1974",
    category="single-engine",
    empty_weight=1466,
    empty_weight_arm=40.6,
    max_gross_weight=2300,
    useful_load=834,
    datum="Firewall (leading edge of wing on some references)",
    cg_range=CGRange(forward=35, aft=47),
    cg_envelope=_envelope(
        (1500, 35),
        (1950, 35),
        (2300, 37),
        (2300, 47),
        (1500, 47),
    ),
    stations=(
        Station(id="front-seats", name="Front Seats", arm=37, max_weight=400),
        Station(id="rear-seats", name="Rear Seats", arm=73, max_weight=400),
        Station(id="baggage-1", name="Baggage Area 1", arm=95, max_weight=120),
        Station(id="baggage-2", name="Baggage Area 2", arm=123, max_weight=50),
    ),
    fuel_tanks=(
        FuelTank(
            id="main-fuel",
            name="Main Tanks (Both)",
            arm=48,
            max_gallons=43,
            fuel_weight_per_gallon=AVGAS_LBS_PER_GAL,
        ),
    ),
    regulatory=RegulatoryInfo(tcds_number="3A12", far_basis="CAR Part 3"),
    sources={
        "emptyWeight": _cited(
            _C172_POH, "Section 6, Page 6-2",
            notes=(
                "Typical empty weight. Actual varies per serial number; "
                "always use aircraft-specific W&B record."
            ),
        ),
        "emptyWeightArm": _cited(
            _C172_POH, "Section 6, Weight & Balance Data",
            confidence="medium",
            notes=(
                "Typical value. Actual empty weight CG varies per aircraft. "
                "Use data from aircraft W&B record."
            ),
        ),
        "maxGrossWeight": _cited(_C172_TCDS, secondary=_gross_confirmed("2,300")),
        "usefulLoad": _cited(
            _C172_POH, "Section 6",
            notes="Max gross (2,300) minus typical empty weight (1,466). Varies per aircraft.",
        ),
        "cgRange.forward": _cited(_C172_TCDS, "CG Range"),
        "cgRange.aft": _cited(_C172_TCDS, "CG Range"),
        "cgEnvelope": _cited(
            _C172_POH, "Section 6, Figure 6-1, CG Envelope",
            notes=(
                "Envelope simplified to key vertices. "
                "Refer to actual POH chart for precise limits."
            ),
        ),
        **_per_station(
            ("front-seats", "rear-seats", "baggage-1", "baggage-2"),
            _cited(_C172_POH, "Section 6, Loading Arrangements"),
        ),
        "fuelTanks.main-fuel.arm": _cited(_C172_POH, "Section 6, Fuel Loading"),
        "fuelTanks.main-fuel.maxGallons": _cited(
            _C172_POH, "Section 6, Fuel Capacity",
            secondary=SecondarySource(
                document="TCDS 3A12", verification="Confirms 43 gallons usable"
            ),
        ),
    },
)

# --------------------------------------------------------------------------
# Beechcraft Bonanza A36, TCDS 3A15
# --------------------------------------------------------------------------
_A36_POH = PrimarySource(
    document="POH P/N 36-590001-9B, Beechcraft Bonanza A36",
    section="Section 6 - Weight & Balance",
    publisher="Beech Aircraft Corporation",
    date_published="1984-01-01",
)
_A36_TCDS = _tcds("3A15")

BONANZA_A36 = Aircraft(
    id="bonanza-a36",
    name="Beechcraft Bonanza A36",
    model="A36",
    manufacturer="Beech Aircraft Corporation",
    year="1970",
    category="single-engine",
    empty_weight=2450,
    empty_weight_arm=82.0,
    max_gross_weight=3650,
    useful_load=1200,
    datum="Leading edge of wing",
    cg_range=CGRange(forward=80, aft=90),
    cg_envelope=_envelope(
        (2450, 80),
        (3650, 80),
        (3650, 90),
        (2450, 90),
    ),
    stations=(
        Station(id="front-seats", name="Front Seats", arm=85, max_weight=400),
        Station(id="rear-seats", name="Rear Seats", arm=118, max_weight=400),
        Station(id="baggage", name="Baggage Compartment", arm=142, max_weight=400),
    ),
    fuel_tanks=(
        FuelTank(
            id="main-fuel",
            name="Main Fuel Tanks",
            arm=75,
            max_gallons=74,
            fuel_weight_per_gallon=AVGAS_LBS_PER_GAL,
        ),
    ),
    regulatory=RegulatoryInfo(tcds_number="3A15", far_basis="CAR Part 3"),
    sources={
        "emptyWeight": _cited(
            _A36_POH, "Section 6, Weight & Balance Data",
            notes="Typical empty weight. Actual varies per serial number and installed equipment.",
        ),
        "emptyWeightArm": _cited(
            _A36_POH, "Section 6, Weight & Balance Data",
            confidence="medium",
            notes="Typical value. Use aircraft-specific W&B record for actual CG.",
        ),
        "maxGrossWeight": _cited(_A36_TCDS, secondary=_gross_confirmed("3,650")),
        "usefulLoad": _cited(
            _A36_POH, "Section 6",
            notes="Max gross (3,650) minus typical empty weight (2,450). Varies per aircraft.",
        ),
        "cgRange.forward": _cited(_A36_TCDS, "CG Range"),
        "cgRange.aft": _cited(_A36_TCDS, "CG Range"),
        "cgEnvelope": _cited(
            _A36_POH, "Section 6, CG Envelope Chart",
            notes=(
                "Simplified rectangular envelope. Actual POH envelope may have "
                "additional vertices at lower weights."
            ),
        ),
        **_per_station(
            ("rear-seats", "baggage"),
            _cited(_A36_POH, "Section 6, Loading Arrangements"),
        ),
        "stations.front-seats.arm": _cited(
            _A36_POH, "Section 6, Loading Arrangements",
            notes="Adjustable range 80.5-87 inches. Using 85 in midpoint for calculation.",
        ),
        "fuelTanks.main-fuel.arm": _cited(_A36_POH, "Section 6, Fuel Loading"),
        "fuelTanks.main-fuel.maxGallons": _cited(
            _A36_POH, "Section 6, Fuel Capacity",
            secondary=SecondarySource(
                document="TCDS 3A15", verification="Confirms 74 gallons usable"
            ),
        ),
    },
)

# --------------------------------------------------------------------------
# Piper Cherokee Six PA-32-300, TCDS 2A13
# --------------------------------------------------------------------------
_PA32_POH = PrimarySource(
    document="POH VB-753, Piper Cherokee Six PA-32-300",
    section="Section 6 - Weight & Balance",
    publisher="Piper Aircraft Corporation",
    date_published="1972-01-01",
)
_PA32_TCDS = _tcds("2A13")

CHEROKEE_SIX = Aircraft(
    id="cherokee-six-pa32",
    name="Piper Cherokee Six PA-32-300",
    model="PA-32-300",
    manufacturer="Piper Aircraft Corporation",
    year="1966",
    category="single-engine",
    empty_weight=1780,
    empty_weight_arm=87.0,
    max_gross_weight=3400,
    useful_load=1620,
    datum="78.4 inches ahead of wing leading edge",
    cg_range=CGRange(forward=83, aft=95),
    cg_envelope=_envelope(
        (1780, 83),
        (3400, 83),
        (3400, 95),
        (1780, 95),
    ),
    stations=(
        Station(id="front-seats", name="Front Seats", arm=85, max_weight=400),
        Station(id="middle-seats", name="Middle Seats", arm=117, max_weight=400),
        Station(id="rear-seats", name="Rear Seats", arm=142, max_weight=400),
        Station(id="baggage", name="Baggage Area", arm=150, max_weight=200),
    ),
    fuel_tanks=(
        FuelTank(
            id="main-fuel",
            name="Main Fuel Tanks",
            arm=95,
            max_gallons=84,
            fuel_weight_per_gallon=AVGAS_LBS_PER_GAL,
        ),
    ),
    regulatory=RegulatoryInfo(tcds_number="2A13", far_basis="FAR Part 23"),
    sources={
        "emptyWeight": _cited(
            _PA32_POH, "Section 6, Weight & Balance Data",
            notes="Typical empty weight. Actual varies per serial number and installed equipment.",
        ),
        "emptyWeightArm": _cited(
            _PA32_POH, "Section 6, Weight & Balance Data",
            confidence="medium",
            notes="Typical value. Use aircraft-specific W&B record.",
        ),
        "maxGrossWeight": _cited(_PA32_TCDS, secondary=_gross_confirmed("3,400")),
        "usefulLoad": _cited(
            _PA32_POH, "Section 6",
            notes="Max gross (3,400) minus typical empty weight (1,780). Varies per aircraft.",
        ),
        "cgRange.forward": _cited(_PA32_TCDS, "CG Range"),
        "cgRange.aft": _cited(_PA32_TCDS, "CG Range"),
        "cgEnvelope": _cited(
            _PA32_POH, "Section 6, CG Envelope Chart",
            notes="Simplified rectangular envelope. Refer to actual POH for precise limits.",
        ),
        **_per_station(
            ("front-seats", "middle-seats", "rear-seats", "baggage"),
            _cited(_PA32_POH, "Section 6, Loading Arrangements"),
        ),
        "fuelTanks.main-fuel.arm": _cited(_PA32_POH, "Section 6, Fuel Loading"),
        "fuelTanks.main-fuel.maxGallons": _cited(
            _PA32_POH, "Section 6, Fuel Capacity",
            secondary=SecondarySource(
                document="TCDS 2A13", verification="Confirms 84 gallons usable"
            ),
        ),
    },
)

# --------------------------------------------------------------------------
# Piper PA-31-350 Chieftain (Super Chieftain I, N800LP), TCDS A20SO
#
# Forward limit is weight dependent: 119" up to 5,200 lbs, moving aft to
# 128" at max ramp weight.
# --------------------------------------------------------------------------
N800LP_VERIFIED = "2026-02-10"

_N800LP_FORM = PrimarySource(
    document="PA-31-350 Navajo Chieftain Weight & Balance Loading Form (N800LP)",
    section="Loading Form",
    publisher="Aircraft Owner / Operator",
    date_published="2025-01-01",
)
_BLR_ENVELOPE = PrimarySource(
    document="Super Chieftain I Modification CG Envelope, Boundary Layer Research, Inc.",
    section="Section 6 - Weight and Balance, CHIEFTAINT-1020 PA-31-350",
    publisher="Boundary Layer Research, Inc.",
    date_published="2008-01-01",
)


def _n800lp(section: str, **kwargs) -> SourceAttribution:
    kwargs.setdefault("verified", N800LP_VERIFIED)
    return _cited(_N800LP_FORM, section, **kwargs)


NAVAJO_CHIEFTAIN = Aircraft(
    id="navajo-chieftain-pa31",
    name="Piper PA-31-350 Chieftain (Super Chieftain I, N800LP)",
    model="PA-31-350",
    manufacturer="Piper Aircraft Corporation",
    year="1983",
    category="multi-engine",
    empty_weight=5082,  # includes 10 gal unusable fuel
    empty_weight_arm=122.5,
    max_gross_weight=7368,
    max_ramp_weight=7448,
    max_landing_weight=7000,
    useful_load=2286,
    datum="137 inches ahead of wing main spar centerline",
    cg_range=CGRange(forward=119, aft=135),
    cg_envelope=_envelope(
        (4000, 119),
        (5200, 119),
        (5600, 120),
        (6200, 121),
        (6800, 123),
        (7000, 125),
        (7200, 126),
        (7448, 128),
        (7448, 135),
        (4000, 135),
    ),
    stations=(
        Station(id="pilot", name="Pilot", arm=95.0, max_weight=300),
        Station(id="copilot", name="Copilot", arm=95.0, max_weight=300),
        Station(id="fwd-baggage", name="A: Forward Baggage", arm=19.0, max_weight=200),
        Station(id="aft-cockpit", name="B: Aft Cockpit Storage", arm=131.5, max_weight=100),
        Station(id="front-pax", name="C1: Front Passengers", arm=104.0, max_weight=400),
        Station(id="rear-pax", name="C2: Rear Passengers", arm=174.0, max_weight=400),
        Station(id="back-pax", name="D: Back Passengers", arm=218.0, max_weight=400),
        Station(id="rear-baggage", name="E: Rear Baggage", arm=255.0, max_weight=200),
        Station(id="r-nacelle", name="F1: Right Nacelle Baggage", arm=192.0, max_weight=150),
        Station(id="l-nacelle", name="F2: Left Nacelle Baggage", arm=192.0, max_weight=150),
    ),
    fuel_tanks=(
        FuelTank(
            id="main-fuel",
            name="Main Fuel (Inboard L+R)",
            arm=126.8,
            max_gallons=106,
            fuel_weight_per_gallon=AVGAS_LBS_PER_GAL,
        ),
        FuelTank(
            id="aux-fuel",
            name="Aux Fuel (Outboard L+R)",
            arm=148.0,
            max_gallons=76,
            fuel_weight_per_gallon=AVGAS_LBS_PER_GAL,
        ),
    ),
    regulatory=RegulatoryInfo(tcds_number="A20SO", far_basis="FAR Part 23"),
    sources={
        "emptyWeight": _cited(
            PrimarySource(
                document="Weight & Balance Report, Colemill Enterprises Inc, Nashville TN",
                section="Corrected Empty Weight",
                publisher="Albert T MacMillan, A&P/IA (AP 506843185 IA)",
                date_published="2008-05-01",
            ),
            secondary=SecondarySource(
                document="W&B Report Scale Data",
                verification=(
                    "Weighed 26 Mar 2008 at Cornelia Fort Airpark. Total as weighed: "
                    "6,206.00 lbs. Less main fuel (-672), aux fuel (-480), plus unusable "
                    "fuel (+28.20) = 5,082.20 lbs corrected empty weight."
                ),
                date_verified="2008-05-01",
            ),
            verified=N800LP_VERIFIED,
            notes=(
                "Aircraft-specific empty weight from official weighing. Seven seats, one "
                "toilet, four dividers, two side tables. BLR VGs, stall fences, winglets, "
                "4-blade props installed. Includes 10 gal unusable fuel."
            ),
        ),
        "emptyWeightArm": _n800lp(
            "Empty Weight Entry",
            secondary=SecondarySource(
                document="W&B Report, Colemill Enterprises",
                verification=(
                    'W&B report shows CG of 125.26"; loading form uses 122.5". '
                    "Using owner-provided loading form value."
                ),
                date_verified=N800LP_VERIFIED,
            ),
            notes=(
                "Per owner's loading form. W&B report (Colemill, May 2008) shows "
                '125.26"; discrepancy noted.'
            ),
        ),
        "maxGrossWeight": _n800lp(
            "Performance: Maximum take-off weight",
            secondary=SecondarySource(
                document="Super Chieftain I STC, Boundary Layer Research, Inc.",
                verification=(
                    "BLR Super Chieftain I STC increases max takeoff weight from "
                    "standard 7,000 to 7,368 lbs"
                ),
            ),
            notes="Max TAKEOFF weight per Super Chieftain I STC. Standard PA-31-350 is 7,000 lbs.",
        ),
        "maxRampWeight": _n800lp(
            "Performance: Maximum ramp weight",
            notes="Max ramp weight per Super Chieftain I STC. 80 lb allowance for taxi fuel burn.",
        ),
        "maxLandingWeight": _n800lp(
            "Performance: Maximum landing weight",
            secondary=SecondarySource(
                document="FAA TCDS A20SO",
                verification="Standard PA-31-350 max landing weight of 7,000 lbs confirmed",
            ),
        ),
        "usefulLoad": _n800lp(
            "Derived from max takeoff minus empty weight",
            notes=(
                "Max takeoff (7,368) minus empty weight (5,082) = 2,286 lbs. W&B report "
                "shows 2,163 lbs based on earlier 7,245 gross weight."
            ),
        ),
        "cgRange.forward": _cited(
            _BLR_ENVELOPE, "Forward CG Limit",
            confidence="medium",
            verified=N800LP_VERIFIED,
            notes=(
                'Weight-dependent forward limit: ~119" at or below 5,200 lbs, increasing '
                'to ~128" at max ramp (7,448 lbs). See CG envelope for precise limits.'
            ),
        ),
        "cgRange.aft": _cited(_BLR_ENVELOPE, "Aft CG Limit", verified=N800LP_VERIFIED),
        "cgEnvelope": _cited(
            _BLR_ENVELOPE,
            confidence="medium",
            verified=N800LP_VERIFIED,
            secondary=SecondarySource(
                document="Owner-provided CG Envelope Chart (photographed)",
                verification=(
                    "Envelope points traced from Super Chieftain I chart. Initial readings "
                    'adjusted ~1" forward after owner verified manual CG calculations '
                    "against original chart."
                ),
                date_verified=N800LP_VERIFIED,
            ),
            notes=(
                "Traced from Super Chieftain I CG envelope chart (Boundary Layer Research). "
                "Pilot should verify against original chart for critical operations."
            ),
        ),
        "stations.pilot.arm": _n800lp("Pilot Station"),
        "stations.copilot.arm": _n800lp("Copilot Station"),
        "stations.fwd-baggage.arm": _n800lp("Station A"),
        "stations.aft-cockpit.arm": _n800lp("Station B"),
        "stations.front-pax.arm": _n800lp("Station C1"),
        "stations.rear-pax.arm": _n800lp("Station C2"),
        "stations.back-pax.arm": _n800lp("Station D"),
        "stations.rear-baggage.arm": _n800lp("Station E"),
        "stations.r-nacelle.arm": _n800lp("Station F1"),
        "stations.l-nacelle.arm": _n800lp("Station F2"),
        "fuelTanks.main-fuel.arm": _n800lp("Main fuel (usable)"),
        "fuelTanks.main-fuel.maxGallons": _n800lp(
            "Main fuel capacity",
            notes=(
                "106 gal usable. Total capacity 112 gal (56 per side). "
                "6 gal unusable included in empty weight."
            ),
        ),
        "fuelTanks.aux-fuel.arm": _n800lp("Aux fuel (usable)"),
        "fuelTanks.aux-fuel.maxGallons": _n800lp(
            "Aux fuel capacity",
            notes=(
                "76 gal usable. Total capacity 80 gal (40 per side). "
                "4 gal unusable included in empty weight."
            ),
        ),
    },
)


# --------------------------------------------------------------------------
# Lookup
# --------------------------------------------------------------------------
_AIRCRAFT: dict[str, Aircraft] = {
    a.id: a for a in (CESSNA_172M, BONANZA_A36, CHEROKEE_SIX, NAVAJO_CHIEFTAIN)
}


def list_aircraft() -> list[Aircraft]:
    """All reference aircraft, in display order."""
    return list(_AIRCRAFT.values())


def get_aircraft(aircraft_id: str) -> Aircraft | None:
    """Return the aircraft with *aircraft_id*, or None if unknown."""
    return _AIRCRAFT.get(aircraft_id)
