"""Perimeter measurement of text runs.

This module calibrates a font size from a physical letter height, renders the
text outline at that size and integrates its length.

Key components:
- calibrate_font_size: Font size that gives the reference glyph a target height
- PerimeterMeasurer: Measures text runs in meters
"""

import math
import time
from pathlib import Path

import structlog

from signcalc.config import FontSourceConfig, LoggingConfig, MeasurementConfig
from signcalc.core.geometry import path_length
from signcalc.domain import FontMetrics, TextMeasurement
from signcalc.exceptions import InvalidDimensionError
from signcalc.io import FontReader
from signcalc.utils import configure_logging

logger = structlog.get_logger("signcalc.core")


def calibrate_font_size(
    target_px: float,
    units_per_em: int,
    cap_height_units: float,
) -> float:
    """Calculate the nominal font size that renders a glyph at a target height.

    Font size is defined on the em square, not on any visible glyph. Scaling
    by units_per_em / cap_height makes the reference glyph, rather than the
    em square, exactly target_px tall.

    Args:
        target_px: Wanted reference glyph height in output units
        units_per_em: Font units per em
        cap_height_units: Reference glyph height in font units

    Returns:
        Font size in output units
    """
    return target_px * (units_per_em / cap_height_units)


class PerimeterMeasurer:
    """Measures the outline length of text set at a physical letter height.

    Each call loads its own font; nothing is cached or shared between calls,
    so one measurer can be used from several threads.

    Example:
        measurer = PerimeterMeasurer()
        meters = measurer.measure("OPEN", "Montserrat-Black.ttf", 0.4)
    """

    def __init__(
        self,
        config: MeasurementConfig | None = None,
        source: FontSourceConfig | None = None,
        logging: LoggingConfig | None = None,
    ) -> None:
        """Initialize the measurer.

        Args:
            config: Unit scale, curve sampling and reference glyph settings
            source: Font fetching settings
            logging: Log destinations and levels
        """
        self.config = config or MeasurementConfig()
        self.source = source or FontSourceConfig()
        self.logging = logging or LoggingConfig()
        self.logger = configure_logging(
            log_file=self.logging.log_file,
            console_level=self.logging.log_level,
            file_level=self.logging.file_log_level,
            quiet=False,
        )

    def measure(
        self,
        text: str,
        font_resource: str | Path,
        target_cap_height_m: float,
    ) -> float:
        """Measure the outline length of a text run.

        Args:
            text: Text to measure
            font_resource: Font path or http(s) URL
            target_cap_height_m: Height of the reference glyph in meters

        Returns:
            Total contour length in meters (0 for blank text)

        Raises:
            FontLoadError: If the font cannot be fetched or parsed
            InvalidDimensionError: If the target height is negative or not finite
        """
        return self.measure_run(text, font_resource, target_cap_height_m).meters

    def measure_run(
        self,
        text: str,
        font_resource: str | Path,
        target_cap_height_m: float,
    ) -> TextMeasurement:
        """Measure a text run and report the intermediate values.

        Blank text returns a zero measurement without touching the font
        resource.

        Args:
            text: Text to measure
            font_resource: Font path or http(s) URL
            target_cap_height_m: Height of the reference glyph in meters

        Returns:
            TextMeasurement with metrics, font size and lengths

        Raises:
            FontLoadError: If the font cannot be fetched or parsed
            InvalidDimensionError: If the target height is negative or not finite
        """
        if not math.isfinite(target_cap_height_m) or target_cap_height_m < 0:
            raise InvalidDimensionError("letter height", target_cap_height_m)

        if not text.strip():
            logger.debug("Blank text skipped", font=str(font_resource))
            return TextMeasurement(
                text=text,
                font=str(font_resource),
                cap_height_m=target_cap_height_m,
            )

        start_time = time.time()

        with FontReader(
            font_resource,
            timeout=self.source.timeout_seconds,
            latin_reference=self.config.latin_reference_char,
            fallback_reference=self.config.fallback_reference_char,
        ) as reader:
            ref_char = reader.reference_for(text)
            metrics = FontMetrics(
                units_per_em=reader.units_per_em,
                reference_char=ref_char,
                cap_height_units=reader.cap_height_units(text),
            )

            target_px = self.config.to_pixels(target_cap_height_m)
            font_size_px = calibrate_font_size(
                target_px, metrics.units_per_em, metrics.cap_height_units
            )
            logger.debug(
                "Font size calibrated",
                font=reader.resource,
                reference=ref_char,
                cap_height_units=metrics.cap_height_units,
                upm=metrics.units_per_em,
                font_size_px=round(font_size_px, 4),
            )

            path = reader.outline_path(text, font_size_px)

        length_px = path_length(path, samples=self.config.curve_samples)
        measurement = TextMeasurement(
            text=text,
            font=str(font_resource),
            cap_height_m=target_cap_height_m,
            metrics=metrics,
            font_size_px=font_size_px,
            length_px=length_px,
            meters=self.config.to_meters(length_px),
            subpaths=path.subpath_count(),
        )

        logger.info(
            "Text measured",
            text=text,
            font=measurement.font,
            meters=round(measurement.meters, 4),
            subpaths=measurement.subpaths,
            duration_ms=round((time.time() - start_time) * 1000, 2),
        )
        return measurement
