"""CG envelope geometry: pure predicates over the approved loading polygon.

Pure math module with no I/O and no state. Called twice per calculator.calculate()
and exposed on its own for envelope chart rendering, which needs the same
limits-at-weight query to draw boundary lines.

Coordinate conventions:
  - x-axis = CG position (inches aft of datum)
  - y-axis = aircraft weight (lbs)
  - Vertices are ordered; edges join consecutive points and wrap last -> first.
  - Polygons with fewer than 3 vertices are degenerate: never inside, no limits.

Both functions must produce bit-identical results to the web and iOS
clients; keep the comparison operators and the order of floating-point
operations exactly as written.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NamedTuple, Protocol


class Vertex(Protocol):
    """Anything with a weight and a CG (EnvelopePoint in practice)."""

    @property
    def weight(self) -> float: ...

    @property
    def cg(self) -> float: ...


class EnvelopeLimits(NamedTuple):
    """Forward (min CG) and aft (max CG) limits at a single weight."""

    forward: float
    aft: float


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def is_point_in_envelope(weight: float, cg: float, envelope: Sequence[Vertex]) -> bool:
    """Even-odd ray-casting test for the point (cg, weight).

    A horizontal ray is cast towards +CG. An edge counts as crossed when
    exactly one endpoint lies strictly above the query weight, so a point on
    a horizontal edge is inside at the bottom of the polygon and outside at
    the top.
    """
    n = len(envelope)
    if n < 3:
        return False

    inside = False
    j = n - 1
    for i in range(n):
        xi, yi = envelope[i].cg, envelope[i].weight
        xj, yj = envelope[j].cg, envelope[j].weight

        if ((yi > weight) != (yj > weight)) and (
            cg < ((xj - xi) * (weight - yi)) / (yj - yi) + xi
        ):
            inside = not inside

        j = i

    return inside


def get_limits_at_weight(weight: float, envelope: Sequence[Vertex]) -> EnvelopeLimits | None:
    """Forward/aft CG limits where the line ``weight = const`` cuts the envelope.

    Every edge whose closed weight interval contains *weight* contributes
    one intersection (two for a horizontal edge). Must be called with the
    actual total weight; for trapezoidal envelopes the forward limit moves
    aft as weight increases.

    Returns:
        EnvelopeLimits(forward, aft), or None when the polygon is degenerate
        or *weight* lies outside its vertical span.
    """
    n = len(envelope)
    if n < 3:
        return None

    intersections: list[float] = []
    for i in range(n):
        p1 = envelope[i]
        p2 = envelope[(i + 1) % n]

        min_w = min(p1.weight, p2.weight)
        max_w = max(p1.weight, p2.weight)
        if min_w <= weight <= max_w:
            if p1.weight == p2.weight:
                intersections.append(p1.cg)
                intersections.append(p2.cg)
            else:
                t = (weight - p1.weight) / (p2.weight - p1.weight)
                intersections.append(p1.cg + t * (p2.cg - p1.cg))

    if not intersections:
        return None

    return EnvelopeLimits(forward=min(intersections), aft=max(intersections))
