"""WKT reading and writing for line geometries.

This module provides helpers to parse input lines from WKT text or files
and to format or save resolved curves as WKT.
"""

from pathlib import Path

from shapely import wkt
from shapely.errors import ShapelyError
from shapely.geometry import LineString
from shapely.geometry.base import BaseGeometry

from offsetcurve.exceptions import GeometryReadError


def read_line(text: str, source: str = "<text>") -> LineString:
    """Parse a WKT LINESTRING.

    Args:
        text: WKT text
        source: Name of the text's origin, used in error messages

    Returns:
        The parsed LineString

    Raises:
        GeometryReadError: If the text is not valid WKT or not a LINESTRING
    """
    try:
        geometry = wkt.loads(text.strip())
    except ShapelyError as e:
        raise GeometryReadError(source, str(e)) from e

    if not isinstance(geometry, LineString):
        raise GeometryReadError(source, f"expected LINESTRING, got {geometry.geom_type}")
    if geometry.is_empty:
        raise GeometryReadError(source, "LINESTRING is empty")
    return geometry


def read_line_file(path: Path) -> LineString:
    """Read a WKT LINESTRING from a text file.

    Raises:
        GeometryReadError: If the file cannot be read or parsed
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GeometryReadError(str(path), str(e)) from e
    return read_line(text, source=str(path))


def format_wkt(geometry: BaseGeometry, precision: int | None = None) -> str:
    """Format a geometry as WKT.

    Args:
        geometry: Geometry to format
        precision: Decimal places (full precision if None)
    """
    if precision is None:
        return wkt.dumps(geometry, trim=True)
    return wkt.dumps(geometry, rounding_precision=precision, trim=True)


def write_wkt(geometry: BaseGeometry, path: Path, precision: int | None = None) -> None:
    """Write a geometry to a file as WKT followed by a newline."""
    path.write_text(format_wkt(geometry, precision) + "\n", encoding="utf-8")
