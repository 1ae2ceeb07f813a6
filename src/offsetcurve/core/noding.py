"""Simplification and noding of raw offset curves.

Both operations are delegated to shapely (GEOS):

- simplify_coordinates: Douglas-Peucker reduction; endpoints are kept.
- LineNoder: splits line work at every crossing so segments meet only at
  shared vertices, using a unary union of the input.
"""

import logging
from collections.abc import Iterable

from shapely.geometry import LineString, MultiLineString
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from offsetcurve.domain import Coordinate, to_coordinates

logger = logging.getLogger(__name__)


def simplify_coordinates(coords: list[Coordinate], tolerance: float) -> list[Coordinate]:
    """Reduce a coordinate sequence within a distance tolerance.

    Args:
        coords: Coordinates of a line (at least two)
        tolerance: Maximum deviation of removed vertices; 0 disables

    Returns:
        Reduced coordinates with the first and last points unchanged
    """
    if tolerance <= 0.0 or len(coords) <= 2:
        return list(coords)

    line = LineString([c.to_tuple() for c in coords])
    simplified = line.simplify(tolerance, preserve_topology=False)
    result = to_coordinates(simplified.coords)

    # Endpoints must survive exactly so they can be found in the noded graph
    if not result or result[0] != coords[0] or result[-1] != coords[-1]:
        return list(coords)
    return result


def iter_lines(geometry: BaseGeometry) -> Iterable[LineString]:
    """Yield every LineString component of a geometry.

    Non-linear components (points, polygons) are ignored.
    """
    if isinstance(geometry, LineString):
        yield geometry
    elif hasattr(geometry, "geoms"):
        for part in geometry.geoms:
            yield from iter_lines(part)


class LineNoder:
    """Nodes line work so crossings become explicit shared vertices.

    Example:
        noder = LineNoder()
        fragments = noder.node(LineString(coords))
        noded = noder.to_geometry(fragments)
    """

    def node(self, geometry: BaseGeometry) -> list[list[Coordinate]]:
        """Split line work at all intersections.

        Args:
            geometry: Any geometry containing line components

        Returns:
            Non-crossing fragments as coordinate lists
        """
        lines = list(iter_lines(geometry))
        if not lines:
            return []

        merged = unary_union(lines)
        fragments = [to_coordinates(line.coords) for line in iter_lines(merged) if not line.is_empty]
        logger.debug("Noded %d input lines into %d fragments", len(lines), len(fragments))
        return fragments

    def to_geometry(self, fragments: list[list[Coordinate]]) -> MultiLineString:
        """Assemble fragments into one MultiLineString."""
        return MultiLineString([[c.to_tuple() for c in frag] for frag in fragments])
