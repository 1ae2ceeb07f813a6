"""Core processing algorithms for offsetcurve.

This module contains the core algorithms for:

- Geometry operations (segment offsets, intersections, turn angles)
- Raw offset curve generation (round, mitre and bevel joins)
- Simplification and noding of line work
- Shortest-path resolution through noded line work
- Offset curve orchestration

Key functions:
- compute: Resolve an offset curve with the linear-scan resolver
- compute_pq: Resolve an offset curve with the priority-queue resolver
- find_path: Shortest path through line work between two vertices
- simplify_coordinates: Reduce a coordinate sequence within a tolerance

Key classes:
- OffsetCurve: Orchestrates the full offset curve workflow
- RawOffsetBuilder: Builds the raw, possibly self-intersecting offset
- LineNoder: Splits line work at every crossing
- ShortestPathResolver: Finds shortest paths in a planar graph
"""

from offsetcurve.core.geometry import (
    line_intersection,
    offset_segment,
    perpendicular_direction,
    remove_repeated_points,
    segment_intersection,
    turn_angle,
)
from offsetcurve.core.noding import LineNoder, iter_lines, simplify_coordinates
from offsetcurve.core.offset_builder import RawOffsetBuilder
from offsetcurve.core.pipeline import OffsetCurve, compute, compute_pq
from offsetcurve.core.shortest_path import ShortestPathResolver, find_path

__all__ = [
    # Pipeline
    "OffsetCurve",
    "compute",
    "compute_pq",
    # Collaborators
    "LineNoder",
    "RawOffsetBuilder",
    "ShortestPathResolver",
    "find_path",
    "iter_lines",
    "simplify_coordinates",
    # Geometry functions
    "line_intersection",
    "offset_segment",
    "perpendicular_direction",
    "remove_repeated_points",
    "segment_intersection",
    "turn_angle",
]
