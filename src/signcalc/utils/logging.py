"""Logging utilities for SignCalc."""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from signcalc.domain import SignQuote, TextMeasurement

_installed_handlers: list[logging.Handler] = []


@dataclass
class MeasurementStats:
    """Statistics accumulated over measurement runs."""

    measured_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    quote_count: int = 0
    total_meters: float = 0.0
    errors: list[tuple[str, str]] = field(default_factory=list)
    run_timings_ms: list[float] = field(default_factory=list)

    @property
    def avg_run_time_ms(self) -> float | None:
        """Average time per measured run."""
        if not self.run_timings_ms:
            return None
        return sum(self.run_timings_ms) / len(self.run_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed last time
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)
    _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = get_logger()
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


def get_logger(name: str = "signcalc") -> structlog.stdlib.BoundLogger:
    """Get a structlog logger for a signcalc component."""
    return structlog.get_logger(name)


class MeasurementLogger:
    """Logger for tracking measurement runs and statistics.

    Safe to call from several threads at once.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = MeasurementStats()
        self._lock = threading.Lock()

    def log_run_complete(self, measurement: "TextMeasurement", duration_ms: float) -> None:
        """Log a measured text run."""
        self._logger.info(
            "Run measured",
            text=measurement.text,
            font=measurement.font,
            meters=round(measurement.meters, 4),
            duration_ms=round(duration_ms, 2),
        )
        with self._lock:
            self._stats.measured_count += 1
            self._stats.total_meters += measurement.meters
            self._stats.run_timings_ms.append(duration_ms)

    def log_run_skipped(self, text: str, reason: str) -> None:
        """Log a run that needed no measuring."""
        self._logger.debug("Run skipped", text=text, reason=reason)
        with self._lock:
            self._stats.skipped_count += 1

    def log_run_error(self, text: str, font: str, error: Exception) -> None:
        """Log a failed text run."""
        self._logger.error(
            "Run failed",
            text=text,
            font=font,
            error=str(error),
            error_type=type(error).__name__,
        )
        with self._lock:
            self._stats.error_count += 1
            self._stats.errors.append((text, str(error)))

    def log_logo(self, diameter_m: float, meters: float) -> None:
        """Log the logo circle contribution."""
        self._logger.debug(
            "Logo measured",
            diameter_m=diameter_m,
            meters=round(meters, 4),
        )
        with self._lock:
            self._stats.total_meters += meters

    def log_quote(self, quote: "SignQuote") -> None:
        """Log a completed quote."""
        self._logger.info(
            "Quote complete",
            primary_m=round(quote.primary.meters, 4),
            secondary_m=round(quote.secondary_meters, 4),
            logo_m=round(quote.logo_meters, 4),
            total_m=round(quote.total_meters, 4),
        )
        with self._lock:
            self._stats.quote_count += 1

    @property
    def stats(self) -> MeasurementStats:
        """Get current measurement statistics."""
        return self._stats
