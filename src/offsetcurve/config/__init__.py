"""Configuration management for offsetcurve.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- BufferConfig: Raw offset curve generation settings
- ResolverConfig: Shortest-path resolver settings
- LoggingConfig: Logging settings
- OffsetCurveSettings: Main application settings
"""

from offsetcurve.config.settings import (
    BufferConfig,
    JoinStyle,
    LoggingConfig,
    OffsetCurveSettings,
    ResolverConfig,
    ResolverStrategy,
    get_default_settings,
)

__all__ = [
    "BufferConfig",
    "JoinStyle",
    "LoggingConfig",
    "OffsetCurveSettings",
    "ResolverConfig",
    "ResolverStrategy",
    "get_default_settings",
]
