"""Configuration management for signcalc.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MeasurementConfig: Unit scale, curve sampling and reference glyphs
- FontSourceConfig: Font fetching settings
- LoggingConfig: Logging settings
- SigncalcSettings: Main application settings
"""

from signcalc.config.settings import (
    ARABIC_ALEF,
    FontSourceConfig,
    LoggingConfig,
    MeasurementConfig,
    SigncalcSettings,
    get_default_settings,
)

__all__ = [
    "ARABIC_ALEF",
    "FontSourceConfig",
    "LoggingConfig",
    "MeasurementConfig",
    "SigncalcSettings",
    "get_default_settings",
]
