"""Core measurement algorithms for signcalc.

This module contains the core algorithms for:

- Path length accumulation (a fold over path commands)
- Bezier arc length approximation by polyline sampling
- Font size calibration from a physical letter height
- Sign quotes combining text lines and a logo circle

All geometry functions are pure (no side effects).

Key functions:
- path_length: Total outline length of a path
- trace_step: Single transition of the path tracing state machine
- circle_circumference: Perimeter of the logo circle
- calibrate_font_size: Font size giving the reference glyph a target height

Key classes:
- PerimeterMeasurer: Measures text runs in meters
- QuoteCalculator: Measures every part of a sign
"""

from signcalc.core.geometry import (
    DEFAULT_CURVE_SAMPLES,
    TraceState,
    circle_circumference,
    distance,
    path_length,
    trace_path,
    trace_step,
)
from signcalc.core.measurer import PerimeterMeasurer, calibrate_font_size
from signcalc.core.quote import QuoteCalculator, TextRun

__all__ = [
    "DEFAULT_CURVE_SAMPLES",
    # Measurement classes
    "PerimeterMeasurer",
    "QuoteCalculator",
    "TextRun",
    "TraceState",
    # Geometry functions
    "calibrate_font_size",
    "circle_circumference",
    "distance",
    "path_length",
    "trace_path",
    "trace_step",
]
