"""Unit tests for path length accumulation and Bezier sampling."""

import math

import pytest

from signcalc.core._bezier import (
    cubic_length,
    cubic_point,
    quadratic_length,
    quadratic_point,
)
from signcalc.core.geometry import (
    DEFAULT_CURVE_SAMPLES,
    TraceState,
    circle_circumference,
    distance,
    path_length,
    trace_path,
    trace_step,
)
from signcalc.domain import ClosePath, CubicCurveTo, LineTo, MoveTo, OutlinePath, QuadCurveTo
from signcalc.exceptions import PathError

KAPPA = 0.5522847498


def cubic_circle(cx: float, cy: float, r: float) -> list:
    """Circle made of four cubic arcs."""
    k = KAPPA * r
    return [
        MoveTo(cx, cy + r),
        CubicCurveTo(cx + k, cy + r, cx + r, cy + k, cx + r, cy),
        CubicCurveTo(cx + r, cy - k, cx + k, cy - r, cx, cy - r),
        CubicCurveTo(cx - k, cy - r, cx - r, cy - k, cx - r, cy),
        CubicCurveTo(cx - r, cy + k, cx - k, cy + r, cx, cy + r),
        ClosePath(),
    ]


class TestDistance:
    """Tests for distance function."""

    def test_pythagorean_triple(self):
        assert distance((0, 0), (3, 4)) == 5.0

    def test_same_point(self):
        assert distance((7.5, -2.0), (7.5, -2.0)) == 0.0


class TestBezier:
    """Tests for Bezier evaluation and sampled arc length."""

    def test_quadratic_endpoints(self):
        p0, p1, p2 = (0.0, 0.0), (50.0, 100.0), (100.0, 0.0)
        assert quadratic_point(0.0, p0, p1, p2) == p0
        assert quadratic_point(1.0, p0, p1, p2) == p2
        assert quadratic_point(0.5, p0, p1, p2) == (50.0, 50.0)

    def test_cubic_endpoints(self):
        p0, p1, p2, p3 = (0.0, 0.0), (0.0, 100.0), (100.0, 100.0), (100.0, 0.0)
        assert cubic_point(0.0, p0, p1, p2, p3) == p0
        assert cubic_point(1.0, p0, p1, p2, p3) == p3
        assert cubic_point(0.5, p0, p1, p2, p3) == (50.0, 75.0)

    def test_straight_quadratic_is_chord(self):
        length = quadratic_length((0, 0), (5, 5), (10, 10), DEFAULT_CURVE_SAMPLES)
        assert length == pytest.approx(math.hypot(10, 10))

    def test_straight_cubic_is_chord(self):
        length = cubic_length((0, 0), (10, 0), (20, 0), (30, 0), DEFAULT_CURVE_SAMPLES)
        assert length == pytest.approx(30.0)

    def test_degenerate_curve_has_zero_length(self):
        p = (4.0, 4.0)
        assert quadratic_length(p, p, p, DEFAULT_CURVE_SAMPLES) == 0.0
        assert cubic_length(p, p, p, p, DEFAULT_CURVE_SAMPLES) == 0.0

    def test_single_step_is_chord(self):
        length = cubic_length((0, 0), (0, 100), (100, 100), (100, 0), 1)
        assert length == pytest.approx(100.0)

    def test_refining_samples_never_shortens(self):
        p0, p1, p2, p3 = (0, 0), (0, 100), (100, 100), (100, 0)
        lengths = [cubic_length(p0, p1, p2, p3, n) for n in (3, 6, 12, 24, 48)]
        assert lengths == sorted(lengths)


class TestTraceStep:
    """Tests for single transitions of the tracing state machine."""

    def test_initial_state(self):
        assert TraceState() == TraceState((0.0, 0.0), (0.0, 0.0), 0.0)

    def test_move_sets_current_and_start(self):
        state = trace_step(TraceState((1, 1), (0, 0), 7.0), MoveTo(10, 20))
        assert state == TraceState((10, 20), (10, 20), 7.0)

    def test_line_adds_distance(self):
        state = trace_step(TraceState((0, 0), (0, 0), 1.0), LineTo(3, 4))
        assert state.current == (3, 4)
        assert state.start == (0, 0)
        assert state.total == 6.0

    def test_close_returns_to_start(self):
        state = trace_step(TraceState((3, 4), (0, 0), 5.0), ClosePath())
        assert state == TraceState((0, 0), (0, 0), 10.0)

    def test_curve_advances_to_end_point(self):
        state = trace_step(TraceState(), QuadCurveTo(5, 10, 10, 0))
        assert state.current == (10, 0)
        assert state.total > 10.0

    def test_unknown_command_raises(self):
        with pytest.raises(PathError, match="Unsupported path command"):
            trace_step(TraceState(), ("L", 1, 2))  # type: ignore[arg-type]


class TestPathLength:
    """Tests for path_length function."""

    def test_square(self):
        side = 250.0
        commands = [
            MoveTo(0, 0),
            LineTo(side, 0),
            LineTo(side, side),
            LineTo(0, side),
            ClosePath(),
        ]
        assert path_length(commands) == 4 * side

    def test_square_with_explicit_closing_line(self):
        commands = [
            MoveTo(0, 0),
            LineTo(10, 0),
            LineTo(10, 10),
            LineTo(0, 10),
            LineTo(0, 0),
            ClosePath(),
        ]
        assert path_length(commands) == 40.0

    def test_triangle_closed_implicitly(self):
        commands = [MoveTo(0, 0), LineTo(3, 0), LineTo(3, 4), ClosePath()]
        assert path_length(commands) == 12.0

    def test_accepts_path_object(self):
        path = OutlinePath(commands=[MoveTo(0, 0), LineTo(0, 8), ClosePath()])
        assert path_length(path) == 16.0

    def test_empty(self):
        assert path_length([]) == 0.0

    def test_lone_move(self):
        assert path_length([MoveTo(100, 100)]) == 0.0

    def test_consecutive_moves(self):
        commands = [MoveTo(0, 0), MoveTo(50, 0), MoveTo(100, 0), MoveTo(150, 0)]
        assert path_length(commands) == 0.0

    def test_close_after_move_only(self):
        assert path_length([MoveTo(5, 5), ClosePath()]) == 0.0

    def test_close_without_any_move(self):
        assert path_length([ClosePath()]) == 0.0

    def test_close_after_single_segment(self):
        # Closing a single line retraces it
        commands = [MoveTo(0, 0), LineTo(0, 5), ClosePath()]
        assert path_length(commands) == 10.0

    def test_line_before_any_move_starts_at_origin(self):
        assert path_length([LineTo(3, 4)]) == 5.0

    def test_subpaths_do_not_leak(self):
        commands = [
            MoveTo(0, 0),
            LineTo(10, 0),
            ClosePath(),
            MoveTo(1000, 1000),
            LineTo(1000, 1010),
            ClosePath(),
        ]
        assert path_length(commands) == 40.0

    def test_commands_after_close_start_from_subpath_start(self):
        commands = [MoveTo(0, 0), LineTo(10, 0), ClosePath(), LineTo(0, 10)]
        assert path_length(commands) == 30.0

    def test_overlapping_contours_are_summed(self):
        square = [MoveTo(0, 0), LineTo(10, 0), LineTo(10, 10), LineTo(0, 10), ClosePath()]
        assert path_length(square + square) == 80.0

    def test_cubic_circle_within_one_percent(self):
        r = 300.0
        length = path_length(cubic_circle(0, 0, r))
        assert abs(length - 2 * math.pi * r) / (2 * math.pi * r) < 0.01

    def test_more_samples_approach_circumference(self):
        r = 100.0
        expected = 2 * math.pi * r
        coarse = path_length(cubic_circle(0, 0, r), samples=4)
        fine = path_length(cubic_circle(0, 0, r), samples=96)
        assert abs(fine - expected) < abs(coarse - expected)

    def test_quadratic_arc(self):
        # Quarter circle approximated by a single quadratic: length between
        # chord and control polygon
        commands = [MoveTo(100, 0), QuadCurveTo(100, 100, 0, 100)]
        length = path_length(commands)
        assert math.hypot(100, 100) < length < 200.0

    def test_trace_path_final_state(self):
        state = trace_path([MoveTo(0, 0), LineTo(10, 0), MoveTo(20, 20), LineTo(20, 30)])
        assert state.current == (20, 30)
        assert state.start == (20, 20)
        assert state.total == 20.0

    def test_invalid_element_raises(self):
        with pytest.raises(PathError):
            path_length([MoveTo(0, 0), "Z"])  # type: ignore[list-item]


class TestCircleCircumference:
    """Tests for circle_circumference function."""

    @pytest.mark.parametrize("diameter", [0.0, 0.25, 1.0, 2.5, 40.0])
    def test_pi_times_diameter(self, diameter):
        assert circle_circumference(diameter) == math.pi * diameter

    def test_zero(self):
        assert circle_circumference(0.0) == 0.0
