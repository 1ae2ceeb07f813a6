"""Geometry I/O layer for offsetcurve.

This module handles reading input lines and writing resolved curves as
WKT using shapely.

Key functions:
- read_line: Parse a WKT LINESTRING
- read_line_file: Read a WKT LINESTRING from a file
- format_wkt: Format a geometry as WKT
- write_wkt: Write a geometry to a file as WKT
"""

from offsetcurve.io.wkt import format_wkt, read_line, read_line_file, write_wkt

__all__ = [
    "format_wkt",
    "read_line",
    "read_line_file",
    "write_wkt",
]
