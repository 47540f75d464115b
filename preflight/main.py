"""FastAPI application: entry point for the PreFlight W&B service.

Lifespan applies the configured log level, registers route modules and
serves the health endpoint.

Run with any ASGI server, e.g. ``uvicorn preflight.main:app``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from preflight.aircraft_data import list_aircraft
from preflight.config import get_cors_origins, get_log_level, get_mode
from preflight.routes.aircraft import router as aircraft_router
from preflight.routes.calculate import router as calculate_router
from preflight.routes.info import router as info_router
from preflight.routes.websocket import router as websocket_router

logger = logging.getLogger("preflight")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup tasks:
    1. Apply PREFLIGHT_LOG_LEVEL to the "preflight" logger tree
    2. Log the deployment mode and the loaded reference aircraft
    """
    logger.setLevel(get_log_level())
    logger.info("PREFLIGHT_MODE=%s", get_mode())
    logger.info(
        "Loaded %d reference aircraft: %s",
        len(list_aircraft()),
        ", ".join(a.id for a in list_aircraft()),
    )
    yield
    logger.info("Shutting down")


app = FastAPI(title="PreFlight W&B", version=VERSION, lifespan=lifespan)

# ---------------------------------------------------------------------------
# CORS middleware (web client dev server at localhost:5173 by default)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# API route registration
# ---------------------------------------------------------------------------
app.include_router(aircraft_router)
app.include_router(calculate_router)
app.include_router(info_router)
app.include_router(websocket_router)


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok", "version": VERSION, "mode": get_mode()}
