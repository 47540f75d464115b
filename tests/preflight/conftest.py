"""Shared fixtures for preflight tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from preflight.aircraft_data import BONANZA_A36, CESSNA_172M, NAVAJO_CHIEFTAIN
from preflight.main import app
from preflight.models import (
    Aircraft,
    CGRange,
    EnvelopePoint,
    FuelTank,
    Station,
)


def make_envelope(*points: tuple[float, float]) -> tuple[EnvelopePoint, ...]:
    """Build an envelope from (weight, cg) pairs."""
    return tuple(EnvelopePoint(weight=w, cg=cg) for w, cg in points)


# ---------------------------------------------------------------------------
# Envelope Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def rectangle() -> tuple[EnvelopePoint, ...]:
    """cg 35..47 over 1500..2300 lbs."""
    return make_envelope((1500, 35), (2300, 35), (2300, 47), (1500, 47))


@pytest.fixture
def trapezoid() -> tuple[EnvelopePoint, ...]:
    """Forward limit moves from 35 to 38 between 1500 and 2000 lbs."""
    return make_envelope((1000, 35), (1500, 35), (2000, 38), (2000, 47), (1000, 47))


# ---------------------------------------------------------------------------
# Aircraft Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def cessna() -> Aircraft:
    return CESSNA_172M


@pytest.fixture
def bonanza() -> Aircraft:
    return BONANZA_A36


@pytest.fixture
def navajo() -> Aircraft:
    return NAVAJO_CHIEFTAIN


@pytest.fixture
def trainer(trapezoid: tuple[EnvelopePoint, ...]) -> Aircraft:
    """Small synthetic aircraft whose arithmetic is exact in binary floating point.

    Every limit (ramp, landing, weight-dependent forward CG) is populated so
    each warning path can be reached.
    """
    return Aircraft(
        id="trainer",
        name="Test Trainer",
        empty_weight=1000,
        empty_weight_arm=40,
        max_gross_weight=2000,
        max_ramp_weight=2040,
        max_landing_weight=1900,
        cg_range=CGRange(forward=35, aft=47),
        cg_envelope=trapezoid,
        stations=(
            Station(id="front", name="Front Seats", arm=36, max_weight=600),
            Station(id="aft", name="Aft Cargo", arm=76, max_weight=500),
        ),
        fuel_tanks=(
            FuelTank(id="fuel", name="Main Tank", arm=48, max_gallons=40,
                     fuel_weight_per_gallon=6),
        ),
    )


# ---------------------------------------------------------------------------
# HTTP Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
