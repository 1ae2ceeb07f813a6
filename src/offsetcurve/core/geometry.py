"""Geometric operations for offset curve construction.

This module provides core mathematical utilities for:
- Perpendicular vector computation
- Segment offsetting
- Line segment intersection
- Turn orientation between consecutive segments
- Repeated point removal

All functions are pure and stateless.
"""

import math

from offsetcurve.domain import Coordinate


def perpendicular_direction(p1: Coordinate, p2: Coordinate) -> tuple[float, float]:
    """Calculate the unit perpendicular vector to a line from p1 to p2.

    The perpendicular is rotated 90 degrees counter-clockwise from the
    direction vector (p2 - p1), so it points to the left of the line.

    Args:
        p1: Start point of line
        p2: End point of line

    Returns:
        Tuple (px, py) representing the unit perpendicular vector

    Raises:
        ValueError: If p1 and p2 are the same point (zero-length line)

    Examples:
        >>> px, py = perpendicular_direction(Coordinate(0.0, 0.0), Coordinate(1.0, 0.0))
        >>> (px, py)
        (-0.0, 1.0)
    """
    dx = p2.x - p1.x
    dy = p2.y - p1.y

    length = math.hypot(dx, dy)
    if length == 0.0:
        raise ValueError("Cannot calculate perpendicular of zero-length line")

    dx /= length
    dy /= length

    # Rotate 90 degrees counter-clockwise: (x, y) -> (-y, x)
    return -dy, dx


def offset_segment(
    p1: Coordinate, p2: Coordinate, distance: float
) -> tuple[Coordinate, Coordinate]:
    """Offset a segment by a signed distance.

    Positive distances offset to the left of the direction p1 -> p2,
    negative distances to the right.

    Args:
        p1: Segment start
        p2: Segment end
        distance: Signed offset distance

    Returns:
        Tuple of the offset start and end points
    """
    px, py = perpendicular_direction(p1, p2)
    ox, oy = px * distance, py * distance
    return Coordinate(p1.x + ox, p1.y + oy), Coordinate(p2.x + ox, p2.y + oy)


def segment_intersection(
    p1: Coordinate, p2: Coordinate, p3: Coordinate, p4: Coordinate
) -> Coordinate | None:
    """Find the intersection point of two line segments.

    Uses parametric line equations. Returns None if the segments are
    parallel or if the intersection lies outside either segment.

    Args:
        p1: First endpoint of segment 1
        p2: Second endpoint of segment 1
        p3: First endpoint of segment 2
        p4: Second endpoint of segment 2

    Returns:
        Coordinate at the intersection, or None
    """
    x1, y1 = p1.x, p1.y
    x2, y2 = p2.x, p2.y
    x3, y3 = p3.x, p3.y
    x4, y4 = p4.x, p4.y

    denom = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)

    # Parallel or coincident
    if abs(denom) < 1e-12:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / denom
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / denom

    if 0 <= t <= 1 and 0 <= u <= 1:
        return Coordinate(x1 + t * (x2 - x1), y1 + t * (y2 - y1))

    return None


def line_intersection(
    p1: Coordinate, d1: tuple[float, float], p2: Coordinate, d2: tuple[float, float]
) -> Coordinate | None:
    """Intersect two infinite lines given as point and direction.

    Returns:
        Intersection point, or None if the lines are parallel
    """
    cross = d1[0] * d2[1] - d1[1] * d2[0]
    if abs(cross) < 1e-12:
        return None
    t = ((p2.x - p1.x) * d2[1] - (p2.y - p1.y) * d2[0]) / cross
    return Coordinate(p1.x + t * d1[0], p1.y + t * d1[1])


def turn_angle(p0: Coordinate, p1: Coordinate, p2: Coordinate) -> float:
    """Signed turn angle at p1 when travelling p0 -> p1 -> p2.

    Positive for a left (counter-clockwise) turn, negative for a right
    turn, in the range [-pi, pi].
    """
    ax, ay = p1.x - p0.x, p1.y - p0.y
    bx, by = p2.x - p1.x, p2.y - p1.y
    cross = ax * by - ay * bx
    dot = ax * bx + ay * by
    return math.atan2(cross, dot)


def remove_repeated_points(coords: list[Coordinate]) -> list[Coordinate]:
    """Drop consecutive duplicate coordinates."""
    result: list[Coordinate] = []
    for c in coords:
        if not result or result[-1] != c:
            result.append(c)
    return result
