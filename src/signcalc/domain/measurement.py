"""Measurement results.

This module defines the values produced by a measurement:
- FontMetrics: Calibration inputs taken from the font
- TextMeasurement: Perimeter of one run of text
- SignQuote: Perimeters of every part of a sign and their total
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FontMetrics:
    """Vertical metrics used to calibrate the font size.

    Attributes:
        units_per_em: Font coordinate scale
        reference_char: Character whose glyph defines letter height
        cap_height_units: Height of the reference glyph in font units
    """

    units_per_em: int
    reference_char: str
    cap_height_units: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "units_per_em": self.units_per_em,
            "reference_char": self.reference_char,
            "cap_height_units": self.cap_height_units,
        }


@dataclass(frozen=True)
class TextMeasurement:
    """Perimeter of a single run of text.

    A blank run is never measured: metrics is None and every number is zero.

    Attributes:
        text: Measured text
        font: Font resource the text was set in
        cap_height_m: Target height of the reference glyph in meters
        metrics: Font calibration metrics (None for blank text)
        font_size_px: Nominal font size in intermediate pixels
        length_px: Outline length in intermediate pixels
        meters: Outline length in meters
        subpaths: Number of contours that contributed length
    """

    text: str
    font: str
    cap_height_m: float
    metrics: FontMetrics | None = None
    font_size_px: float = 0.0
    length_px: float = 0.0
    meters: float = 0.0
    subpaths: int = 0

    @property
    def skipped(self) -> bool:
        """Whether the run was blank and no font was loaded."""
        return self.metrics is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "font": self.font,
            "cap_height_m": self.cap_height_m,
            "metrics": self.metrics.to_dict() if self.metrics else None,
            "font_size_px": self.font_size_px,
            "length_px": self.length_px,
            "meters": self.meters,
            "subpaths": self.subpaths,
        }


@dataclass(frozen=True)
class SignQuote:
    """Perimeter breakdown of a sign.

    Attributes:
        primary: Measurement of the main line of text
        secondary: Measurement of the second line (None when absent)
        logo_meters: Circumference of the logo circle (0 when absent)
    """

    primary: TextMeasurement
    secondary: TextMeasurement | None = None
    logo_meters: float = 0.0

    @property
    def secondary_meters(self) -> float:
        return self.secondary.meters if self.secondary else 0.0

    @property
    def total_meters(self) -> float:
        """Sum of every part of the sign."""
        return self.primary.meters + self.secondary_meters + self.logo_meters

    def to_dict(self) -> dict[str, Any]:
        return {
            "primary": self.primary.to_dict(),
            "secondary": self.secondary.to_dict() if self.secondary else None,
            "logo_meters": self.logo_meters,
            "total_meters": self.total_meters,
        }
