"""Configuration settings for Offsetcurve."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class JoinStyle(str, Enum):
    """How offset segments are joined at outside turns."""

    ROUND = "round"
    MITRE = "mitre"
    BEVEL = "bevel"


class ResolverStrategy(str, Enum):
    """Next-node selection strategy for the shortest-path search."""

    LINEAR_SCAN = "linear"
    PRIORITY_QUEUE = "pq"


class BufferConfig(BaseModel):
    """Configuration for raw offset curve generation.

    Defaults match the usual buffer parameters: round joins approximated with
    8 segments per quarter circle, a mitre limit of 5 and a simplify factor
    of 1% of the offset distance.
    """

    join_style: JoinStyle = Field(
        default=JoinStyle.ROUND,
        description="Join style for outside turns",
    )
    quadrant_segments: int = Field(
        default=8,
        ge=1,
        le=64,
        description="Segments used to approximate a quarter circle in round joins",
    )
    mitre_limit: float = Field(
        default=5.0,
        gt=0.0,
        le=100.0,
        description="Maximum mitre length as a multiple of the offset distance",
    )
    simplify_factor: float = Field(
        default=0.01,
        ge=0.0,
        le=1.0,
        description="Simplification tolerance as a fraction of the offset distance",
    )

    def simplify_tolerance(self, distance: float) -> float:
        """Get the simplification tolerance for an offset distance.

        Args:
            distance: Signed offset distance

        Returns:
            Non-negative tolerance
        """
        return abs(distance) * self.simplify_factor


class ResolverConfig(BaseModel):
    """Configuration for the shortest-path resolver."""

    strategy: ResolverStrategy = Field(
        default=ResolverStrategy.LINEAR_SCAN,
        description="Next-node selection strategy",
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


class OffsetCurveSettings(BaseModel):
    """Main application settings."""

    buffer: BufferConfig = Field(default_factory=BufferConfig)
    resolver: ResolverConfig = Field(default_factory=ResolverConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> OffsetCurveSettings:
    """Get default application settings."""
    return OffsetCurveSettings()
