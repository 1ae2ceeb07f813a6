"""Offset curve orchestration.

This module coordinates the full offset curve workflow:

1. Build the raw offset curve of the input line
2. Simplify it with a tolerance proportional to the offset distance
3. Node the simplified curve so self-intersections become vertices
4. Extract the shortest path from the curve's first to its last point
5. Wrap the path as a LineString

Key components:
- OffsetCurve: Orchestrator class holding buffer and resolver settings
- compute / compute_pq: One-call helpers for the two resolver strategies
"""

import math
from collections.abc import Sequence

from shapely.geometry import LineString
from shapely.geometry.base import BaseGeometry

from offsetcurve.config import BufferConfig, OffsetCurveSettings, ResolverStrategy
from offsetcurve.core.geometry import remove_repeated_points
from offsetcurve.core.noding import LineNoder, simplify_coordinates
from offsetcurve.core.offset_builder import RawOffsetBuilder
from offsetcurve.core.shortest_path import ShortestPathResolver
from offsetcurve.domain import Coordinate, to_coordinates
from offsetcurve.exceptions import InvalidOffsetInputError, OffsetCurveError
from offsetcurve.utils import OffsetCurveLogger, SearchStats

LineLike = LineString | Sequence[Coordinate | Sequence[float]]


class OffsetCurve:
    """Computes clean offset curves for lines.

    Each call to compute() builds its own graph and search state, so one
    instance can be used for any number of lines.

    Example:
        builder = OffsetCurve(strategy=ResolverStrategy.PRIORITY_QUEUE)
        curve = builder.compute(LineString([(0, 10), (125, 10), (75, 0), (200, 0)]), 5.0)
    """

    def __init__(
        self,
        config: BufferConfig | None = None,
        strategy: ResolverStrategy = ResolverStrategy.LINEAR_SCAN,
        logger: OffsetCurveLogger | None = None,
    ) -> None:
        """Initialize the offset curve builder.

        Args:
            config: Buffer parameters (defaults used if None)
            strategy: Shortest-path selection strategy
            logger: Logger for pipeline stages (module logger if None)
        """
        self.config = config or BufferConfig()
        self.strategy = strategy
        self.logger = logger or OffsetCurveLogger()
        self.builder = RawOffsetBuilder(self.config)
        self.noder = LineNoder()
        self.last_stats: SearchStats | None = None

    @classmethod
    def from_settings(cls, settings: OffsetCurveSettings) -> "OffsetCurve":
        """Create a builder from application settings."""
        return cls(config=settings.buffer, strategy=settings.resolver.strategy)

    def compute_raw(self, line: LineLike, distance: float) -> list[Coordinate]:
        """Compute the simplified raw offset curve.

        The result may self-intersect. Its first and last coordinates are
        the endpoints of the resolved curve.

        Args:
            line: Input line
            distance: Signed offset distance (positive = left side)

        Returns:
            Simplified raw offset coordinates

        Raises:
            InvalidOffsetInputError: If the distance or line is degenerate
        """
        coords = _validate(line, distance)
        raw = self.builder.get_offset_curve(coords, distance)
        tolerance = self.config.simplify_tolerance(distance)
        simplified = simplify_coordinates(raw, tolerance)
        self.logger.log_raw_curve(len(raw), len(simplified), tolerance)
        return simplified

    def compute(self, line: LineLike, distance: float) -> LineString:
        """Compute the resolved offset curve of a line.

        Args:
            line: Input line
            distance: Signed offset distance (positive = left side)

        Returns:
            A simple LineString from the raw curve's start to its end

        Raises:
            InvalidOffsetInputError: If the distance or line is degenerate
            CoordinateNotFoundError: If an endpoint is lost during noding
            UnreachableTargetError: If the noded curve does not connect the
                endpoints (DisconnectedGraphError in practice)
        """
        try:
            curve = self.compute_raw(line, distance)
            start, end = curve[0], curve[-1]

            fragments = self.noder.node(LineString([c.to_tuple() for c in curve]))
            self.logger.log_noding(len(fragments))

            resolver = ShortestPathResolver(self.strategy)
            resolver.add(self.noder.to_geometry(fragments))
            path = resolver.get_result(start, end)
            self.last_stats = resolver.stats
            if len(path) < 2:
                raise InvalidOffsetInputError("offset curve collapsed to a single point")
            self.logger.log_search(self.strategy.value, resolver.stats)
        except OffsetCurveError as e:
            self.logger.log_failure(distance, e)
            raise

        return LineString([c.to_tuple() for c in path])


def _validate(line: LineLike, distance: float) -> list[Coordinate]:
    """Check the offset input and return the line's coordinates."""
    if distance == 0.0 or not math.isfinite(distance):
        raise InvalidOffsetInputError(f"distance must be finite and non-zero, got {distance}")

    if isinstance(line, BaseGeometry):
        if not isinstance(line, LineString):
            raise InvalidOffsetInputError(f"expected a LineString, got {line.geom_type}")
        coords = to_coordinates(line.coords)
    else:
        coords = to_coordinates(line)

    if len(remove_repeated_points(coords)) < 2:
        raise InvalidOffsetInputError("line must have at least two distinct points")
    return coords


def compute(line: LineLike, distance: float, config: BufferConfig | None = None) -> LineString:
    """Compute an offset curve using the linear-scan resolver."""
    return OffsetCurve(config, ResolverStrategy.LINEAR_SCAN).compute(line, distance)


def compute_pq(line: LineLike, distance: float, config: BufferConfig | None = None) -> LineString:
    """Compute an offset curve using the priority-queue resolver."""
    return OffsetCurve(config, ResolverStrategy.PRIORITY_QUEUE).compute(line, distance)
