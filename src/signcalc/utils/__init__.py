"""Utility functions for signcalc.

This module provides utility functions including:

- Logging setup and configuration
- Measurement statistics
"""

from signcalc.utils.logging import (
    MeasurementLogger,
    MeasurementStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "MeasurementLogger",
    "MeasurementStats",
    "configure_logging",
    "get_logger",
]
