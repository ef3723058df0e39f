"""Internal Bezier curve evaluation and arc length sampling.

This is an internal module containing helper functions for path_length.
Not intended for public use.
"""

import math
from collections.abc import Callable

Point = tuple[float, float]


def _lerp(a: Point, b: Point, t: float) -> Point:
    # Exact when a == b, so coincident control points give a zero-length curve
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def quadratic_point(t: float, p0: Point, p1: Point, p2: Point) -> Point:
    """Evaluate a quadratic Bezier curve at parameter t (de Casteljau).

    Args:
        t: Curve parameter in [0, 1]
        p0: Start point
        p1: Control point
        p2: End point

    Returns:
        Point on the curve
    """
    return _lerp(_lerp(p0, p1, t), _lerp(p1, p2, t), t)


def cubic_point(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """Evaluate a cubic Bezier curve at parameter t (de Casteljau).

    Args:
        t: Curve parameter in [0, 1]
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point

    Returns:
        Point on the curve
    """
    return quadratic_point(t, _lerp(p0, p1, t), _lerp(p1, p2, t), _lerp(p2, p3, t))


def sampled_length(point_at: Callable[[float], Point], steps: int) -> float:
    """Approximate the arc length of a parametric curve with a polyline.

    The curve is sampled at steps + 1 equally spaced parameters from t=0 to
    t=1 inclusive and the chord lengths are summed. The result never exceeds
    the true arc length and converges to it as steps grows.

    Args:
        point_at: Function mapping t to a point on the curve
        steps: Number of chords

    Returns:
        Polyline length
    """
    prev = point_at(0.0)
    length = 0.0
    for i in range(1, steps + 1):
        point = point_at(i / steps)
        length += math.hypot(point[0] - prev[0], point[1] - prev[1])
        prev = point
    return length


def quadratic_length(p0: Point, p1: Point, p2: Point, steps: int) -> float:
    """Approximate the arc length of a quadratic Bezier curve."""
    return sampled_length(lambda t: quadratic_point(t, p0, p1, p2), steps)


def cubic_length(p0: Point, p1: Point, p2: Point, p3: Point, steps: int) -> float:
    """Approximate the arc length of a cubic Bezier curve."""
    return sampled_length(lambda t: cubic_point(t, p0, p1, p2, p3), steps)
