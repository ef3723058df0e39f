"""Domain models for signcalc.

This module contains the outline path model and measurement results.
All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries for logging and JSON output
- Independent of fonttools and HarfBuzz implementation details

Key classes:
- MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ClosePath: Path commands
- OutlinePath: Ordered sequence of path commands
- FontMetrics: Font calibration metrics
- TextMeasurement: Perimeter of one run of text
- SignQuote: Perimeter breakdown of a whole sign
"""

from signcalc.domain.measurement import FontMetrics, SignQuote, TextMeasurement
from signcalc.domain.path import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    OutlinePath,
    PathCommand,
    QuadCurveTo,
)

__all__: list[str] = [
    # Path commands
    "MoveTo",
    "LineTo",
    "QuadCurveTo",
    "CubicCurveTo",
    "ClosePath",
    "PathCommand",
    "OutlinePath",
    # Results
    "FontMetrics",
    "TextMeasurement",
    "SignQuote",
]
