"""Configuration settings for SignCalc."""

from pathlib import Path

from pydantic import BaseModel, Field

ARABIC_ALEF = "ا"


class MeasurementConfig(BaseModel):
    """Configuration for outline measurement.

    Lengths are computed in an intermediate pixel space. The pixel scale is
    applied on the way in (target height) and on the way out (length), so it
    cancels and only affects floating-point rounding.
    """

    pixels_per_meter: float = Field(
        default=1000.0,
        gt=0.0,
        description="Intermediate pixels per physical meter",
    )
    curve_samples: int = Field(
        default=24,
        ge=1,
        le=1024,
        description="Equal parameter steps used to flatten each Bezier segment",
    )
    latin_reference_char: str = Field(
        default="H",
        min_length=1,
        max_length=1,
        description="Glyph whose height defines letter height for Latin text",
    )
    fallback_reference_char: str = Field(
        default=ARABIC_ALEF,
        min_length=1,
        max_length=1,
        description="Glyph whose height defines letter height for non-Latin text",
    )

    def to_pixels(self, meters: float) -> float:
        """Convert a physical length to intermediate pixels."""
        return meters * self.pixels_per_meter

    def to_meters(self, pixels: float) -> float:
        """Convert an intermediate pixel length to meters."""
        return pixels / self.pixels_per_meter


class FontSourceConfig(BaseModel):
    """Configuration for fetching font resources."""

    timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="Timeout for fetching fonts over HTTP",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class SigncalcSettings(BaseModel):
    """Main application settings."""

    measurement: MeasurementConfig = Field(default_factory=MeasurementConfig)
    source: FontSourceConfig = Field(default_factory=FontSourceConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> SigncalcSettings:
    """Get default application settings."""
    return SigncalcSettings()
