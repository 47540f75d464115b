"""/ws/calculate: WebSocket channel for live recalculation.

Connection lifecycle:
1. Client opens ws://host:8000/ws/calculate
2. Client sends a LoadingScenario JSON message on each input change
3. Server answers the newest pending scenario (last-write-wins)
4. Server sends {"result": CalculationResult} or {"error": ..., "detail": ...}
5. On disconnect, pending scenarios are dropped

Concurrency model:
- A task group runs two concurrent tasks: a reader and a calculator.
- The reader receives messages, validates them and posts scenarios to a
  memory channel. Bad input is answered immediately and the connection
  stays open.
- The calculator drains the channel down to the latest scenario and runs
  the engine inline (it is pure and fast).
- A lock protects ws.send_text so replies from both tasks never interleave.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import anyio
from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from preflight.aircraft_data import get_aircraft
from preflight.calculator import UnknownEntityError, calculate
from preflight.models import LoadingScenario

logger = logging.getLogger("preflight.ws")

router = APIRouter()

# Maximum accepted WebSocket message size (bytes).
MAX_MESSAGE_SIZE = 64 * 1024  # 64 KB


def _build_error_message(error: str, detail: str = "") -> str:
    payload: dict[str, str] = {"error": error}
    if detail:
        payload["detail"] = detail
    return json.dumps(payload)


def _build_result_message(result: Any) -> str:
    return json.dumps({"result": result.model_dump(mode="json", by_alias=True)})


def _run_scenario(scenario: LoadingScenario) -> str:
    """Calculate *scenario* and return the reply message text."""
    aircraft = get_aircraft(scenario.aircraft_id)
    if aircraft is None:
        return _build_error_message(
            error="Aircraft not found",
            detail=f"Unknown aircraft id {scenario.aircraft_id!r}",
        )
    try:
        result = calculate(aircraft, scenario.station_loads, scenario.fuel_loads)
    except UnknownEntityError as exc:
        logger.warning("Scenario references unknown %s: %s", exc.kind, exc)
        return _build_error_message(error=f"Unknown {exc.kind}", detail=str(exc))
    return _build_result_message(result)


@router.websocket("/ws/calculate")
async def calculate_websocket(ws: WebSocket) -> None:
    """Handle a single WebSocket connection for live recalculation."""
    await ws.accept()
    logger.info("WebSocket client connected")

    send_ch, recv_ch = anyio.create_memory_object_stream[LoadingScenario](max_buffer_size=16)
    ws_lock = anyio.Lock()

    async def _send(message: str) -> None:
        async with ws_lock:
            await ws.send_text(message)

    async def reader_task() -> None:
        """Read messages from the WebSocket and post validated scenarios."""
        try:
            while True:
                try:
                    raw = await ws.receive()
                except WebSocketDisconnect:
                    return
                if raw["type"] == "websocket.disconnect":
                    return

                if raw.get("text") is not None:
                    text = raw["text"]
                elif raw.get("bytes") is not None:
                    raw_bytes = raw["bytes"]
                    if len(raw_bytes) > MAX_MESSAGE_SIZE:
                        await _send(_build_error_message(
                            error="Message too large",
                            detail=f"Maximum message size is {MAX_MESSAGE_SIZE} bytes",
                        ))
                        continue
                    try:
                        text = raw_bytes.decode("utf-8")
                    except UnicodeDecodeError:
                        logger.warning("Received non-UTF-8 binary frame, ignoring")
                        await _send(_build_error_message(
                            error="Invalid message format",
                            detail="Expected UTF-8 encoded JSON text",
                        ))
                        continue
                else:
                    continue

                if len(text.encode("utf-8")) > MAX_MESSAGE_SIZE:
                    await _send(_build_error_message(
                        error="Message too large",
                        detail=f"Maximum message size is {MAX_MESSAGE_SIZE} bytes",
                    ))
                    continue

                try:
                    data = json.loads(text)
                except json.JSONDecodeError as exc:
                    logger.warning("Malformed JSON from WebSocket client: %s", exc)
                    await _send(_build_error_message(error="Invalid JSON", detail=str(exc)))
                    continue

                try:
                    scenario = LoadingScenario.model_validate(data)
                except ValidationError as exc:
                    logger.warning("Scenario validation error: %s", exc)
                    detail_parts = []
                    for err in exc.errors()[:5]:
                        loc = ".".join(str(part) for part in err["loc"])
                        detail_parts.append(f"{loc}: {err['msg']}")
                    await _send(_build_error_message(
                        error="Validation error",
                        detail="; ".join(detail_parts),
                    ))
                    continue

                try:
                    send_ch.send_nowait(scenario)
                except anyio.WouldBlock:
                    # Channel full: older scenarios are stale anyway
                    while True:
                        try:
                            recv_ch.receive_nowait()
                        except anyio.WouldBlock:
                            break
                    send_ch.send_nowait(scenario)
        finally:
            send_ch.close()

    async def calculator_task() -> None:
        """Consume scenarios and answer only the newest one."""
        async for scenario in recv_ch:
            latest = scenario
            while True:
                try:
                    latest = recv_ch.receive_nowait()
                except (anyio.WouldBlock, anyio.EndOfStream):
                    break

            try:
                await _send(_run_scenario(latest))
            except Exception:
                logger.info("Could not deliver result; client went away")
                return

    try:
        async with anyio.create_task_group() as tg:
            tg.start_soon(reader_task)
            tg.start_soon(calculator_task)
    except WebSocketDisconnect:
        logger.info("WebSocket client disconnected")
    except Exception:
        logger.exception("WebSocket error")
    else:
        logger.info("WebSocket client disconnected")
