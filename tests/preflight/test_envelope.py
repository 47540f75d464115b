"""Tests for CG envelope geometry: point containment and limits at weight."""

from __future__ import annotations

import pytest

from preflight.envelope import EnvelopeLimits, get_limits_at_weight, is_point_in_envelope
from preflight.models import EnvelopePoint


def make_envelope(*points: tuple[float, float]) -> tuple[EnvelopePoint, ...]:
    return tuple(EnvelopePoint(weight=w, cg=cg) for w, cg in points)


# ---------------------------------------------------------------------------
# is_point_in_envelope
# ---------------------------------------------------------------------------


class TestPointInEnvelope:
    def test_centre_of_rectangle_is_inside(self, rectangle) -> None:
        assert is_point_in_envelope(1900, 41, rectangle) is True

    @pytest.mark.parametrize(
        "weight, cg",
        [
            (1900, 34),  # forward of envelope
            (1900, 48),  # aft of envelope
            (1400, 41),  # below minimum weight
            (2400, 41),  # above maximum weight
        ],
    )
    def test_outside_points(self, rectangle, weight: float, cg: float) -> None:
        assert is_point_in_envelope(weight, cg, rectangle) is False

    def test_forward_edge_counts_as_inside(self, rectangle) -> None:
        assert is_point_in_envelope(1900, 35, rectangle) is True

    def test_aft_edge_counts_as_outside(self, rectangle) -> None:
        assert is_point_in_envelope(1900, 47, rectangle) is False

    def test_bottom_edge_counts_as_inside(self, rectangle) -> None:
        assert is_point_in_envelope(1500, 41, rectangle) is True

    def test_top_edge_counts_as_outside(self, rectangle) -> None:
        assert is_point_in_envelope(2300, 41, rectangle) is False

    def test_sloped_forward_limit(self, trapezoid) -> None:
        # Forward limit at 1750 lbs is 36.5
        assert is_point_in_envelope(1750, 36, trapezoid) is False
        assert is_point_in_envelope(1750, 37, trapezoid) is True

    def test_fewer_than_three_vertices_is_never_inside(self) -> None:
        line = make_envelope((1000, 30), (2000, 50))
        assert is_point_in_envelope(1500, 40, line) is False
        assert is_point_in_envelope(1500, 40, ()) is False

    def test_vertex_order_does_not_matter(self, rectangle) -> None:
        reversed_env = tuple(reversed(rectangle))
        assert is_point_in_envelope(1900, 41, reversed_env) is True
        assert is_point_in_envelope(1900, 48, reversed_env) is False

    def test_accepts_any_weight_cg_objects(self) -> None:
        class Pt:
            def __init__(self, weight: float, cg: float) -> None:
                self.weight = weight
                self.cg = cg

        env = [Pt(1500, 35), Pt(2300, 35), Pt(2300, 47), Pt(1500, 47)]
        assert is_point_in_envelope(1900, 41, env) is True


# ---------------------------------------------------------------------------
# get_limits_at_weight
# ---------------------------------------------------------------------------


class TestLimitsAtWeight:
    def test_rectangle_limits(self, rectangle) -> None:
        assert get_limits_at_weight(1900, rectangle) == EnvelopeLimits(forward=35, aft=47)

    def test_trapezoid_interpolates_forward_limit(self, trapezoid) -> None:
        limits = get_limits_at_weight(1750, trapezoid)
        assert limits is not None
        assert limits.forward == 36.5
        assert limits.aft == 47

    def test_trapezoid_below_slope(self, trapezoid) -> None:
        assert get_limits_at_weight(1250, trapezoid) == (35, 47)

    def test_horizontal_edges_contribute_both_ends(self, trapezoid) -> None:
        assert get_limits_at_weight(2000, trapezoid) == (38, 47)
        assert get_limits_at_weight(1000, trapezoid) == (35, 47)

    def test_forward_limit_moves_aft_with_weight(self, trapezoid) -> None:
        forwards = [get_limits_at_weight(w, trapezoid).forward for w in (1500, 1750, 2000)]
        assert forwards == sorted(forwards)
        assert forwards[0] < forwards[-1]

    @pytest.mark.parametrize("weight", [999, 2001, 0, -50])
    def test_outside_vertical_span_is_none(self, trapezoid, weight: float) -> None:
        assert get_limits_at_weight(weight, trapezoid) is None

    def test_degenerate_polygon_is_none(self) -> None:
        assert get_limits_at_weight(1500, make_envelope((1000, 30), (2000, 50))) is None
        assert get_limits_at_weight(1500, ()) is None

    def test_navajo_forward_limit_is_weight_dependent(self, navajo) -> None:
        light = get_limits_at_weight(5000, navajo.cg_envelope)
        heavy = get_limits_at_weight(6500, navajo.cg_envelope)
        assert light == (119, 135)
        assert heavy.forward == pytest.approx(122.0)
        assert heavy.aft == 135

    def test_limits_consistent_with_containment(self, trapezoid) -> None:
        limits = get_limits_at_weight(1750, trapezoid)
        mid = (limits.forward + limits.aft) / 2
        assert is_point_in_envelope(1750, mid, trapezoid)
        assert not is_point_in_envelope(1750, limits.forward - 0.01, trapezoid)
        assert not is_point_in_envelope(1750, limits.aft + 0.01, trapezoid)

    def test_returns_named_tuple(self) -> None:
        env = (
            EnvelopePoint(weight=0, cg=0),
            EnvelopePoint(weight=10, cg=0),
            EnvelopePoint(weight=10, cg=10),
        )
        limits = get_limits_at_weight(5, env)
        assert isinstance(limits, EnvelopeLimits)
        assert limits.forward == 0
        assert limits.aft == 5
