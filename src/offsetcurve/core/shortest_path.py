"""Shortest-path resolution through noded line work.

Finds the path of minimum total Euclidean length between two vertices of a
planar graph built from linear geometry. Edge weights are segment lengths,
so they are never negative and a vertex's distance is final once it is
selected.

Two next-vertex selection strategies are available and always produce
paths of equal length:

- LINEAR_SCAN: scan every unvisited vertex for the minimum distance
- PRIORITY_QUEUE: binary heap keyed by (distance, insertion order); entries
  left behind by later improvements are discarded when popped

Both stop as soon as the end vertex is committed, or fail once no reachable
unvisited vertex remains.
"""

import heapq
import itertools
import logging
import math
import time
from collections.abc import Iterable, Sequence

from shapely.geometry import LineString
from shapely.geometry.base import BaseGeometry

from offsetcurve.config import ResolverStrategy
from offsetcurve.core.noding import iter_lines
from offsetcurve.domain import Coordinate, NodeTable, PlanarGraph, path_length, to_coordinates
from offsetcurve.exceptions import DisconnectedGraphError
from offsetcurve.utils import SearchStats

logger = logging.getLogger(__name__)

CoordinateLike = Coordinate | Sequence[float]


class ShortestPathResolver:
    """Finds the shortest path through linear geometry from start to end.

    Any number of geometries may be added before the result is requested;
    only their line components are used. The line work is not noded here:
    segments crossing without a shared vertex stay unconnected.

    A resolver caches the result of its last search. Use a new instance for
    each independent computation.

    Example:
        resolver = ShortestPathResolver(ResolverStrategy.PRIORITY_QUEUE)
        resolver.add(noded_lines)
        coords = resolver.get_result(start, end)
    """

    def __init__(
        self,
        strategy: ResolverStrategy = ResolverStrategy.LINEAR_SCAN,
        graph: PlanarGraph | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            strategy: Next-vertex selection strategy
            graph: Existing graph to search (a new empty one if None)
        """
        self.strategy = strategy
        self._graph = graph if graph is not None else PlanarGraph()
        self._result: list[Coordinate] | None = None
        self._result_key: tuple[Coordinate, Coordinate] | None = None
        self.stats = SearchStats()

    @property
    def graph(self) -> PlanarGraph:
        return self._graph

    def add(self, geometry: BaseGeometry | Iterable[BaseGeometry]) -> None:
        """Add line work from a geometry or a collection of geometries.

        Args:
            geometry: A shapely geometry of any type, or an iterable of them
        """
        self._result = None
        if isinstance(geometry, BaseGeometry):
            for line in iter_lines(geometry):
                self._graph.add_line(to_coordinates(line.coords))
        else:
            for g in geometry:
                self.add(g)

    def get_result(self, start: CoordinateLike, end: CoordinateLike) -> list[Coordinate]:
        """Get the shortest path from start to end.

        Args:
            start: Start vertex coordinate
            end: End vertex coordinate

        Returns:
            Coordinates from start to end inclusive

        Raises:
            CoordinateNotFoundError: If start or end is not a graph vertex
            UnreachableTargetError: If no path connects start and end
        """
        key = (Coordinate.of(start), Coordinate.of(end))
        if self._result is None or self._result_key != key:
            self._result = self._compute(*key)
            self._result_key = key
        return list(self._result)

    def get_line(self, start: CoordinateLike, end: CoordinateLike) -> LineString:
        """Get the shortest path as a LineString.

        Raises:
            ValueError: If start and end are the same vertex
        """
        path = self.get_result(start, end)
        if len(path) < 2:
            raise ValueError("Start and end are the same vertex; path has a single point")
        return LineString([c.to_tuple() for c in path])

    def _compute(self, start: Coordinate, end: Coordinate) -> list[Coordinate]:
        stats = SearchStats(start_time=time.perf_counter())
        self.stats = stats

        table = NodeTable(self._graph)
        stats.vertex_count = len(table)
        start_idx = table.index_of(start, "start")
        end_idx = table.index_of(end, "end")
        table.distance[start_idx] = 0.0

        if start_idx == end_idx:
            table.visited[start_idx] = True
            stats.committed_count = 1
            path = [start]
        else:
            if self.strategy is ResolverStrategy.PRIORITY_QUEUE:
                self._search_priority_queue(table, start_idx, end_idx, stats)
            else:
                self._search_linear_scan(table, start_idx, end_idx, stats)
            path = table.trace_path(start_idx, end_idx)

        stats.path_vertex_count = len(path)
        stats.path_length = path_length(path)
        stats.end_time = time.perf_counter()
        logger.debug(
            "Shortest path (%s): %d vertices, %d committed, length %.6f",
            self.strategy.value,
            stats.vertex_count,
            stats.committed_count,
            stats.path_length,
        )
        return path

    def _relax_neighbours(self, table: NodeTable, current: int, stats: SearchStats) -> list[int]:
        improved = []
        for neighbour, weight in table.neighbours[current]:
            if table.relax(current, neighbour, weight):
                improved.append(neighbour)
        stats.relaxation_count += len(improved)
        return improved

    def _search_linear_scan(
        self, table: NodeTable, start: int, end: int, stats: SearchStats
    ) -> None:
        unvisited = set(range(len(table)))
        distance = table.distance

        current = start
        while True:
            table.visited[current] = True
            unvisited.discard(current)
            stats.committed_count += 1
            if current == end:
                return

            self._relax_neighbours(table, current, stats)

            current = min(unvisited, key=lambda i: (distance[i], i), default=-1)
            if current == -1 or distance[current] == math.inf:
                raise DisconnectedGraphError(
                    table.coordinates[start], table.coordinates[end], stats.committed_count
                )

    def _search_priority_queue(
        self, table: NodeTable, start: int, end: int, stats: SearchStats
    ) -> None:
        sequence = itertools.count()
        heap: list[tuple[float, int, int]] = [(0.0, next(sequence), start)]

        while heap:
            dist, _, current = heapq.heappop(heap)
            if table.visited[current] or dist > table.distance[current]:
                stats.stale_pops += 1
                continue

            table.visited[current] = True
            stats.committed_count += 1
            if current == end:
                return

            for neighbour in self._relax_neighbours(table, current, stats):
                heapq.heappush(heap, (table.distance[neighbour], next(sequence), neighbour))

        raise DisconnectedGraphError(
            table.coordinates[start], table.coordinates[end], stats.committed_count
        )


def find_path(
    geometry: BaseGeometry | Iterable[BaseGeometry],
    start: CoordinateLike,
    end: CoordinateLike,
    strategy: ResolverStrategy = ResolverStrategy.LINEAR_SCAN,
) -> LineString:
    """Find the shortest path through linear geometry from start to end.

    Args:
        geometry: Noded line work
        start: Start vertex coordinate
        end: End vertex coordinate
        strategy: Next-vertex selection strategy

    Returns:
        The path as a LineString
    """
    resolver = ShortestPathResolver(strategy)
    resolver.add(geometry)
    return resolver.get_line(start, end)
