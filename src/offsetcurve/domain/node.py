"""Per-search vertex records for shortest-path resolution.

Node state lives in a NodeTable: parallel arrays indexed by a stable vertex
index, owned by exactly one search. The planar graph itself is never
mutated. ``Node`` is a read-only snapshot of one row, used for inspection
and tests.
"""

import math
from dataclasses import dataclass
from enum import Enum, auto

from offsetcurve.domain.coordinate import Coordinate
from offsetcurve.domain.graph import HalfEdge, PlanarGraph
from offsetcurve.exceptions import CoordinateNotFoundError, UnreachableTargetError

NO_PREDECESSOR = -1


class NodeState(Enum):
    """Lifecycle of a vertex during the search.

    - UNVISITED: Never relaxed, distance is infinite (or the start node)
    - TENTATIVE: Relaxed at least once, distance may still decrease
    - COMMITTED: Selected as current, distance is final
    """

    UNVISITED = auto()
    TENTATIVE = auto()
    COMMITTED = auto()


@dataclass(frozen=True, slots=True)
class Node:
    """Snapshot of one vertex record.

    Attributes:
        index: Stable vertex index in the table
        coordinate: Vertex coordinate
        distance: Best known distance from the start vertex
        predecessor: Coordinate the best distance was reached from, if any
        state: Current lifecycle state
    """

    index: int
    coordinate: Coordinate
    distance: float
    predecessor: Coordinate | None
    state: NodeState

    @property
    def is_visited(self) -> bool:
        return self.state is NodeState.COMMITTED

    def __str__(self) -> str:
        return f"[ {self.coordinate.x}, {self.coordinate.y} d= {self.distance} ]"


class NodeTable:
    """Struct-of-arrays vertex records for one search.

    Rows are created in one batch from the graph's representative vertex
    edges. Neighbours of each vertex are collected by walking the rotational
    ring of its representative edge and stored as ``(index, weight)`` pairs
    where weight is the Euclidean segment length.

    Attributes:
        coordinates: Vertex coordinate per index
        distance: Best known distance per index
        predecessor: Predecessor index per index (NO_PREDECESSOR if unset)
        visited: Committed flag per index
        edges: Representative outgoing edge per index
        neighbours: Adjacency list per index
    """

    def __init__(self, graph: PlanarGraph) -> None:
        self.edges: list[HalfEdge] = graph.vertex_edges()
        self.coordinates: list[Coordinate] = [e.orig for e in self.edges]
        self._index: dict[Coordinate, int] = {c: i for i, c in enumerate(self.coordinates)}

        n = len(self.coordinates)
        self.distance: list[float] = [math.inf] * n
        self.predecessor: list[int] = [NO_PREDECESSOR] * n
        self.visited: list[bool] = [False] * n
        self.neighbours: list[list[tuple[int, float]]] = [
            [(self._index[e.dest], e.length) for e in rep.ring()] for rep in self.edges
        ]

    def __len__(self) -> int:
        return len(self.coordinates)

    def index_of(self, coord: Coordinate, role: str = "vertex") -> int:
        """Look up the index of a vertex coordinate.

        Args:
            coord: Vertex coordinate
            role: Name used in the error message (e.g. "start", "end")

        Raises:
            CoordinateNotFoundError: If the coordinate is not a vertex
        """
        try:
            return self._index[coord]
        except KeyError:
            raise CoordinateNotFoundError(coord, role) from None

    def state(self, index: int) -> NodeState:
        """Lifecycle state of a vertex."""
        if self.visited[index]:
            return NodeState.COMMITTED
        if self.predecessor[index] != NO_PREDECESSOR:
            return NodeState.TENTATIVE
        return NodeState.UNVISITED

    def node(self, index: int) -> Node:
        """Read-only snapshot of a vertex record."""
        pred = self.predecessor[index]
        return Node(
            index=index,
            coordinate=self.coordinates[index],
            distance=self.distance[index],
            predecessor=self.coordinates[pred] if pred != NO_PREDECESSOR else None,
            state=self.state(index),
        )

    def relax(self, current: int, neighbour: int, weight: float) -> bool:
        """Offer a path to neighbour through current.

        Committed neighbours are never updated.

        Returns:
            True if the neighbour's distance strictly improved
        """
        if self.visited[neighbour]:
            return False
        candidate = self.distance[current] + weight
        if candidate < self.distance[neighbour]:
            self.distance[neighbour] = candidate
            self.predecessor[neighbour] = current
            return True
        return False

    def trace_path(self, start: int, end: int) -> list[Coordinate]:
        """Backtrack predecessor links from end to start.

        Returns:
            Coordinates ordered from start to end inclusive

        Raises:
            UnreachableTargetError: If the chain ends before reaching start
        """
        path = [self.coordinates[end]]
        node = end
        while node != start:
            node = self.predecessor[node]
            if node == NO_PREDECESSOR:
                raise UnreachableTargetError(
                    self.coordinates[start],
                    self.coordinates[end],
                    reason="predecessor chain does not reach the start vertex",
                )
            path.append(self.coordinates[node])
        path.reverse()
        return path
