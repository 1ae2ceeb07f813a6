"""Planar graph of half-edges with rotational adjacency.

Each undirected segment is stored as a pair of opposing HalfEdges (each the
``sym`` of the other). Every HalfEdge also sits in a ring around its origin
vertex, ordered counter-clockwise by angle, linked by ``onext``. Walking the
ring from any one outgoing edge therefore visits every segment incident to
the vertex exactly once.
"""

import math
from collections.abc import Iterator

from offsetcurve.domain.coordinate import Coordinate


class HalfEdge:
    """One direction of a graph segment.

    Attributes:
        orig: Origin coordinate
        sym: The opposing half-edge (dest -> orig)
    """

    __slots__ = ("_onext", "orig", "sym")

    def __init__(self, orig: Coordinate) -> None:
        self.orig = orig
        self.sym: HalfEdge = self
        self._onext: HalfEdge = self

    @classmethod
    def create(cls, orig: Coordinate, dest: Coordinate) -> "HalfEdge":
        """Create a linked pair of half-edges and return the orig -> dest one."""
        e0 = cls(orig)
        e1 = cls(dest)
        e0.sym = e1
        e1.sym = e0
        return e0

    @property
    def dest(self) -> Coordinate:
        """Destination coordinate."""
        return self.sym.orig

    @property
    def onext(self) -> "HalfEdge":
        """Next edge counter-clockwise around the origin."""
        return self._onext

    @property
    def angle(self) -> float:
        """Direction angle of the edge in radians, in (-pi, pi]."""
        return math.atan2(self.dest.y - self.orig.y, self.dest.x - self.orig.x)

    @property
    def length(self) -> float:
        """Euclidean length of the edge."""
        return self.orig.distance(self.dest)

    def ring(self) -> Iterator["HalfEdge"]:
        """Iterate every edge around the origin, starting with this one."""
        e = self
        while True:
            yield e
            e = e._onext
            if e is self:
                return

    def degree(self) -> int:
        """Number of edges incident to the origin vertex."""
        return sum(1 for _ in self.ring())

    def find(self, dest: Coordinate) -> "HalfEdge | None":
        """Find the edge around the origin that ends at dest."""
        for e in self.ring():
            if e.dest == dest:
                return e
        return None

    def insert(self, edge: "HalfEdge") -> None:
        """Insert an edge with the same origin into the ring in angular order.

        Args:
            edge: Edge originating at the same vertex as this one

        Raises:
            ValueError: If the edge has a different origin
        """
        if edge.orig != self.orig:
            raise ValueError(f"Cannot insert edge at {edge.orig} into ring at {self.orig}")

        if self._onext is self:
            self._onext = edge
            edge._onext = self
            return

        angle = edge.angle
        prev = self
        while True:
            nxt = prev._onext
            a0, a1 = prev.angle, nxt.angle
            if a0 < a1:
                if a0 <= angle < a1:
                    break
            elif angle >= a0 or angle < a1:
                # nxt wraps around past pi back to the smallest angle
                break
            prev = nxt
            if prev is self:
                break

        edge._onext = prev._onext
        prev._onext = edge

    def __repr__(self) -> str:
        return f"HalfEdge({self.orig} -> {self.dest})"


class PlanarGraph:
    """Graph of vertices and half-edge pairs keyed by coordinate.

    The graph does not node its input: segments that cross without sharing a
    vertex are left crossing. Callers node line work before adding it.

    Example:
        graph = PlanarGraph()
        graph.add_edge(Coordinate(0, 0), Coordinate(1, 0))
        for edge in graph.vertex_edges():
            print(edge.orig, edge.degree())
    """

    def __init__(self) -> None:
        self._vertex_map: dict[Coordinate, HalfEdge] = {}
        self._edge_count = 0

    def add_edge(self, orig: Coordinate, dest: Coordinate) -> HalfEdge | None:
        """Add a segment between two coordinates.

        Zero-length segments are skipped. If the segment already exists the
        existing half-edge from orig to dest is returned.

        Args:
            orig: Start coordinate
            dest: End coordinate

        Returns:
            The half-edge from orig to dest, or None for a zero-length segment
        """
        if orig == dest:
            return None

        e_orig = self._vertex_map.get(orig)
        if e_orig is not None:
            existing = e_orig.find(dest)
            if existing is not None:
                return existing

        edge = HalfEdge.create(orig, dest)
        self._insert(edge)
        self._insert(edge.sym)
        self._edge_count += 1
        return edge

    def _insert(self, edge: HalfEdge) -> None:
        ring = self._vertex_map.get(edge.orig)
        if ring is None:
            self._vertex_map[edge.orig] = edge
        else:
            ring.insert(edge)

    def add_line(self, coords: list[Coordinate]) -> int:
        """Add consecutive segments of a coordinate sequence.

        Returns:
            Number of segments added or found (zero-length ones excluded)
        """
        added = 0
        for i in range(1, len(coords)):
            if self.add_edge(coords[i - 1], coords[i]) is not None:
                added += 1
        return added

    def vertex_edges(self) -> list[HalfEdge]:
        """One representative outgoing edge per distinct vertex.

        Order follows first insertion of each vertex, so it is stable for
        identical input.
        """
        return list(self._vertex_map.values())

    def find_edge(self, orig: Coordinate, dest: Coordinate) -> HalfEdge | None:
        """Find the half-edge from orig to dest, if present."""
        e = self._vertex_map.get(orig)
        if e is None:
            return None
        return e.find(dest)

    def has_vertex(self, coord: Coordinate) -> bool:
        """Check whether a coordinate is a vertex of the graph."""
        return coord in self._vertex_map

    @property
    def vertex_count(self) -> int:
        """Number of distinct vertices."""
        return len(self._vertex_map)

    @property
    def edge_count(self) -> int:
        """Number of undirected segments."""
        return self._edge_count
