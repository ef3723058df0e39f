"""Geometric utility functions for perimeter measurement.

This module provides pure functions for:
- Euclidean distance between points
- Outline path length (a fold over path commands)
- Circle circumference

All functions are pure (no side effects) and operate on plain floats and
domain path commands.
"""

import math
from collections.abc import Iterable
from functools import reduce
from typing import NamedTuple

from signcalc.core._bezier import cubic_length, quadratic_length
from signcalc.domain import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    QuadCurveTo,
)
from signcalc.exceptions import PathError

DEFAULT_CURVE_SAMPLES = 24

Point = tuple[float, float]


class TraceState(NamedTuple):
    """State carried while tracing a path.

    Attributes:
        current: Current pen position
        start: Start of the current subpath (last MoveTo)
        total: Length accumulated so far
    """

    current: Point = (0.0, 0.0)
    start: Point = (0.0, 0.0)
    total: float = 0.0


def distance(a: Point, b: Point) -> float:
    """Calculate Euclidean distance between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance between the points
    """
    return math.hypot(b[0] - a[0], b[1] - a[1])


def trace_step(
    state: TraceState,
    command: PathCommand,
    samples: int = DEFAULT_CURVE_SAMPLES,
) -> TraceState:
    """Advance the trace by one path command.

    Args:
        state: State before the command
        command: Path command to apply
        samples: Chords used to flatten each curve

    Returns:
        State after the command

    Raises:
        PathError: If command is not one of the path command types
    """
    current, start, total = state

    if isinstance(command, MoveTo):
        point = (command.x, command.y)
        return TraceState(point, point, total)

    if isinstance(command, LineTo):
        point = (command.x, command.y)
        return TraceState(point, start, total + distance(current, point))

    if isinstance(command, QuadCurveTo):
        end = (command.x, command.y)
        length = quadratic_length(current, (command.cx, command.cy), end, samples)
        return TraceState(end, start, total + length)

    if isinstance(command, CubicCurveTo):
        end = (command.x, command.y)
        length = cubic_length(
            current,
            (command.c1x, command.c1y),
            (command.c2x, command.c2y),
            end,
            samples,
        )
        return TraceState(end, start, total + length)

    if isinstance(command, ClosePath):
        return TraceState(start, start, total + distance(current, start))

    raise PathError(command)


def trace_path(
    commands: Iterable[PathCommand],
    samples: int = DEFAULT_CURVE_SAMPLES,
) -> TraceState:
    """Fold a sequence of path commands into a final trace state.

    Args:
        commands: Path commands in drawing order
        samples: Chords used to flatten each curve

    Returns:
        State after the last command
    """
    return reduce(
        lambda state, command: trace_step(state, command, samples),
        commands,
        TraceState(),
    )


def path_length(
    commands: Iterable[PathCommand],
    samples: int = DEFAULT_CURVE_SAMPLES,
) -> float:
    """Calculate the total outline length of a path.

    Every subpath is traced once; overlapping contours are not merged, so the
    result is the sum of the raw contour lengths.

    Args:
        commands: Path commands in drawing order (an OutlinePath is accepted)
        samples: Chords used to flatten each curve

    Returns:
        Total length in the path's units

    Raises:
        PathError: If an element is not a path command
    """
    return trace_path(commands, samples).total


def circle_circumference(diameter: float) -> float:
    """Calculate the circumference of a circle.

    Args:
        diameter: Circle diameter

    Returns:
        pi * diameter
    """
    return math.pi * diameter
