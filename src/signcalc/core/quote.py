"""Perimeter quotes for complete signs.

A sign is made of a primary line of text, an optional secondary line and an
optional circular logo. The text lines are measured concurrently with a
thread pool: font fetching is the only slow step and each line loads its own
font.
"""

import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from signcalc.config import SigncalcSettings
from signcalc.core.geometry import circle_circumference
from signcalc.core.measurer import PerimeterMeasurer
from signcalc.domain import SignQuote, TextMeasurement
from signcalc.exceptions import InvalidDimensionError
from signcalc.utils import MeasurementLogger, MeasurementStats


@dataclass(frozen=True)
class TextRun:
    """A line of sign text to be measured.

    Attributes:
        text: Text of the line
        font: Font path or http(s) URL
        cap_height_m: Height of the reference glyph in meters
    """

    text: str
    font: str | Path
    cap_height_m: float


class QuoteCalculator:
    """Computes the perimeter breakdown of a sign.

    Example:
        calculator = QuoteCalculator(SigncalcSettings())
        quote = calculator.quote(
            primary=TextRun("OPEN", "Montserrat-Black.ttf", 0.4),
            logo_diameter_m=0.5,
        )
        print(quote.total_meters)
    """

    def __init__(self, settings: SigncalcSettings | None = None) -> None:
        """Initialize the calculator.

        Args:
            settings: Application settings
        """
        self.settings = settings or SigncalcSettings()
        self.measurer = PerimeterMeasurer(
            config=self.settings.measurement,
            source=self.settings.source,
            logging=self.settings.logging,
        )
        self.measurement_logger = MeasurementLogger(self.measurer.logger)

    @property
    def stats(self) -> MeasurementStats:
        """Statistics accumulated over every quote."""
        return self.measurement_logger.stats

    def _measure(self, run: TextRun) -> TextMeasurement:
        start_time = time.time()
        try:
            measurement = self.measurer.measure_run(run.text, run.font, run.cap_height_m)
        except Exception as e:
            self.measurement_logger.log_run_error(run.text, str(run.font), e)
            raise

        if measurement.skipped:
            self.measurement_logger.log_run_skipped(run.text, "blank text")
        else:
            self.measurement_logger.log_run_complete(
                measurement, (time.time() - start_time) * 1000
            )
        return measurement

    def quote(
        self,
        primary: TextRun,
        secondary: TextRun | None = None,
        logo_diameter_m: float = 0.0,
    ) -> SignQuote:
        """Measure every part of a sign.

        Args:
            primary: Main line of text
            secondary: Optional second line of text
            logo_diameter_m: Diameter of the logo circle (0 for no logo)

        Returns:
            SignQuote with per-part perimeters and total

        Raises:
            FontLoadError: If any line's font cannot be loaded
            InvalidDimensionError: If a height or the logo diameter is invalid
        """
        if logo_diameter_m < 0:
            raise InvalidDimensionError("logo diameter", logo_diameter_m)

        runs = [primary] if secondary is None else [primary, secondary]

        with ThreadPoolExecutor(max_workers=len(runs)) as executor:
            futures = [executor.submit(self._measure, run) for run in runs]
            measurements = [future.result() for future in futures]

        logo_meters = circle_circumference(logo_diameter_m)
        if logo_meters:
            self.measurement_logger.log_logo(logo_diameter_m, logo_meters)

        quote = SignQuote(
            primary=measurements[0],
            secondary=measurements[1] if secondary is not None else None,
            logo_meters=logo_meters,
        )
        self.measurement_logger.log_quote(quote)
        return quote
