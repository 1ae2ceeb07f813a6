"""Utility functions for offsetcurve.

This module provides utility functions including:

- Logging setup and configuration
- Search statistics collection
"""

from offsetcurve.utils.logging import (
    OffsetCurveLogger,
    SearchStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "OffsetCurveLogger",
    "SearchStats",
    "configure_logging",
    "get_logger",
]
