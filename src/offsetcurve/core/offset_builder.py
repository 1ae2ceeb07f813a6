"""Raw offset curve generation.

The raw curve is built segment by segment: every input segment is shifted
perpendicular to itself by the offset distance, and consecutive offset
segments are joined at each input vertex.

- Outside turns (the offset side is on the convex side of the corner) are
  filled with a round arc, a mitre or a bevel according to the join style.
- Inside turns are closed at the crossing point of the two offset segments
  when they cross. When they do not (short segments, sharp corners) the two
  offset endpoints are connected directly, which makes the raw curve loop
  back over itself. Those loops are removed later by noding and path
  extraction.

Positive distances offset to the left of the line direction, negative
distances to the right.
"""

import logging
import math

from offsetcurve.config import BufferConfig, JoinStyle
from offsetcurve.core.geometry import (
    line_intersection,
    offset_segment,
    remove_repeated_points,
    segment_intersection,
    turn_angle,
)
from offsetcurve.domain import Coordinate
from offsetcurve.exceptions import InvalidOffsetInputError

logger = logging.getLogger(__name__)

# Turns flatter than this are treated as collinear
_COLLINEAR_ANGLE = 1e-9


class RawOffsetBuilder:
    """Builds the raw, possibly self-intersecting offset of a line.

    Example:
        builder = RawOffsetBuilder(BufferConfig(join_style=JoinStyle.MITRE))
        raw = builder.get_offset_curve(coords, 5.0)
    """

    def __init__(self, config: BufferConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Buffer parameters (defaults used if None)
        """
        self.config = config or BufferConfig()

    def get_offset_curve(self, coords: list[Coordinate], distance: float) -> list[Coordinate]:
        """Compute the raw offset curve of a coordinate sequence.

        Args:
            coords: Input line coordinates
            distance: Signed offset distance

        Returns:
            Offset coordinates in the direction of the input line

        Raises:
            InvalidOffsetInputError: If the line has fewer than two distinct
                points or the distance is zero or not finite
        """
        if distance == 0.0 or not math.isfinite(distance):
            raise InvalidOffsetInputError(f"distance must be finite and non-zero, got {distance}")

        pts = remove_repeated_points(coords)
        if len(pts) < 2:
            raise InvalidOffsetInputError("line must have at least two distinct points")

        segments = [offset_segment(pts[i], pts[i + 1], distance) for i in range(len(pts) - 1)]

        curve: list[Coordinate] = [segments[0][0]]
        for i in range(1, len(pts) - 1):
            self._add_join(curve, pts[i - 1], pts[i], pts[i + 1], segments[i - 1], segments[i], distance)
        curve.append(segments[-1][1])

        result = remove_repeated_points(curve)
        logger.debug("Raw offset built: %d input vertices, %d output vertices", len(pts), len(result))
        return result

    def _add_join(
        self,
        curve: list[Coordinate],
        p0: Coordinate,
        vertex: Coordinate,
        p2: Coordinate,
        seg0: tuple[Coordinate, Coordinate],
        seg1: tuple[Coordinate, Coordinate],
        distance: float,
    ) -> None:
        theta = turn_angle(p0, vertex, p2)

        if abs(theta) < _COLLINEAR_ANGLE:
            curve.append(seg0[1])
            return

        is_reversal = math.pi - abs(theta) < _COLLINEAR_ANGLE
        if is_reversal:
            theta = -math.copysign(math.pi, distance)

        if is_reversal or theta * distance < 0:
            self._add_outside_turn(curve, p0, vertex, seg0, seg1, theta, distance)
        else:
            self._add_inside_turn(curve, seg0, seg1)

    def _add_outside_turn(
        self,
        curve: list[Coordinate],
        p0: Coordinate,
        vertex: Coordinate,
        seg0: tuple[Coordinate, Coordinate],
        seg1: tuple[Coordinate, Coordinate],
        theta: float,
        distance: float,
    ) -> None:
        style = self.config.join_style
        if style is JoinStyle.ROUND:
            self._add_round_join(curve, vertex, seg0[1], seg1[0], theta, abs(distance))
        elif style is JoinStyle.MITRE:
            self._add_mitre_join(curve, p0, vertex, seg0, seg1, theta, abs(distance))
        else:
            curve.append(seg0[1])
            curve.append(seg1[0])

    def _add_inside_turn(
        self,
        curve: list[Coordinate],
        seg0: tuple[Coordinate, Coordinate],
        seg1: tuple[Coordinate, Coordinate],
    ) -> None:
        crossing = segment_intersection(seg0[0], seg0[1], seg1[0], seg1[1])
        if crossing is not None:
            curve.append(crossing)
        else:
            curve.append(seg0[1])
            curve.append(seg1[0])

    def _add_round_join(
        self,
        curve: list[Coordinate],
        center: Coordinate,
        start: Coordinate,
        end: Coordinate,
        theta: float,
        radius: float,
    ) -> None:
        """Add an arc around center sweeping theta radians from start to end."""
        curve.append(start)

        increment = (math.pi / 2) / self.config.quadrant_segments
        steps = max(1, math.ceil(abs(theta) / increment - 1e-9))
        start_angle = math.atan2(start.y - center.y, start.x - center.x)
        for k in range(1, steps):
            a = start_angle + theta * k / steps
            curve.append(Coordinate(center.x + radius * math.cos(a), center.y + radius * math.sin(a)))

        curve.append(end)

    def _add_mitre_join(
        self,
        curve: list[Coordinate],
        p0: Coordinate,
        vertex: Coordinate,
        seg0: tuple[Coordinate, Coordinate],
        seg1: tuple[Coordinate, Coordinate],
        theta: float,
        radius: float,
    ) -> None:
        """Add a mitre point, clipped to the mitre limit when it is too long."""
        d0 = _unit(p0, vertex)
        d1 = _unit(seg1[0], seg1[1])
        half = abs(theta) / 2

        if half < math.pi / 2 and 1.0 / math.cos(half) <= self.config.mitre_limit:
            mitre = line_intersection(seg0[1], d0, seg1[0], d1)
            if mitre is not None:
                curve.append(mitre)
                return

        limit = self.config.mitre_limit * radius
        if limit <= radius:
            curve.append(seg0[1])
            curve.append(seg1[0])
            return

        # Outward bisector of the corner; straight ahead on a reversal
        bx = (seg0[1].x - vertex.x) + (seg1[0].x - vertex.x)
        by = (seg0[1].y - vertex.y) + (seg1[0].y - vertex.y)
        blen = math.hypot(bx, by)
        if blen < 1e-12 * radius:
            bx, by = d0
        else:
            bx, by = bx / blen, by / blen

        limit_point = Coordinate(vertex.x + bx * limit, vertex.y + by * limit)
        limit_dir = (-by, bx)
        clip0 = line_intersection(seg0[1], d0, limit_point, limit_dir)
        clip1 = line_intersection(seg1[0], d1, limit_point, limit_dir)
        if clip0 is None or clip1 is None:
            curve.append(seg0[1])
            curve.append(seg1[0])
            return

        curve.append(seg0[1])
        curve.append(clip0)
        curve.append(clip1)
        curve.append(seg1[0])


def _unit(a: Coordinate, b: Coordinate) -> tuple[float, float]:
    length = a.distance(b)
    return (b.x - a.x) / length, (b.y - a.y) / length
