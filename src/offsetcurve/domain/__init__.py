"""Domain models for offsetcurve.

This module contains the core domain models representing coordinates,
planar graphs and the per-search vertex records. Models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Keyed by exact coordinate values
- Independent of shapely implementation details

Key classes:
- Coordinate: An immutable 2D point
- HalfEdge: One direction of a graph segment with rotational adjacency
- PlanarGraph: Vertices and half-edge pairs keyed by coordinate
- NodeTable: Struct-of-arrays vertex records owned by one search
- Node: Read-only snapshot of one vertex record
"""

from offsetcurve.domain.coordinate import Coordinate, path_length, to_coordinates
from offsetcurve.domain.graph import HalfEdge, PlanarGraph
from offsetcurve.domain.node import NO_PREDECESSOR, Node, NodeState, NodeTable

__all__: list[str] = [
    # Enums
    "NodeState",
    # Core types
    "Coordinate",
    "HalfEdge",
    "PlanarGraph",
    "Node",
    "NodeTable",
    # Constants
    "NO_PREDECESSOR",
    # Functions
    "path_length",
    "to_coordinates",
]
