"""Tests for shortest-path resolution.

Tests cover:
- Boundary graphs (single edge, start equals end)
- Undirected traversal through the rotational edge rings
- Error cases (missing vertices, disconnected components)
- Agreement between linear-scan and priority-queue strategies
- Optimality against brute-force enumeration on small graphs
"""

import math
import random

import pytest
from shapely.geometry import GeometryCollection, LineString, MultiLineString, Point

from offsetcurve.config import ResolverStrategy
from offsetcurve.core.shortest_path import ShortestPathResolver, find_path
from offsetcurve.domain import Coordinate, PlanarGraph, path_length, to_coordinates
from offsetcurve.exceptions import (
    CoordinateNotFoundError,
    DisconnectedGraphError,
    PathError,
    UnreachableTargetError,
)

STRATEGIES = [ResolverStrategy.LINEAR_SCAN, ResolverStrategy.PRIORITY_QUEUE]


def jittered_grid(
    rows: int, cols: int, seed: int, keep: float = 0.85
) -> tuple[PlanarGraph, Coordinate, Coordinate]:
    """Build a random planar graph on a jittered grid.

    Horizontal, vertical and one diagonal edge per cell are each kept with
    probability ``keep``.
    """
    rng = random.Random(seed)
    pts = {
        (r, c): Coordinate(c * 10.0 + rng.uniform(-3, 3), r * 10.0 + rng.uniform(-3, 3))
        for r in range(rows)
        for c in range(cols)
    }
    graph = PlanarGraph()
    for (r, c), p in pts.items():
        for dr, dc in ((0, 1), (1, 0), (1, 1)):
            q = pts.get((r + dr, c + dc))
            if q is not None and rng.random() < keep:
                graph.add_edge(p, q)
    return graph, pts[(0, 0)], pts[(rows - 1, cols - 1)]


def random_graph(
    n: int, seed: int, density: float = 0.35
) -> tuple[PlanarGraph, list[tuple[Coordinate, Coordinate]], Coordinate, Coordinate]:
    """Build a small random graph over n points.

    Returns the graph, its edge list, and start and end vertices (both
    guaranteed to have at least one edge).
    """
    rng = random.Random(seed)
    pts = [Coordinate(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(n)]
    edges = [
        (pts[i], pts[j])
        for i in range(n)
        for j in range(i + 1, n)
        if rng.random() < density
    ]
    edges.append((pts[0], pts[1]))
    edges.append((pts[-2], pts[-1]))

    graph = PlanarGraph()
    for a, b in edges:
        graph.add_edge(a, b)
    return graph, edges, pts[0], pts[-1]


def brute_force_shortest(
    edges: list[tuple[Coordinate, Coordinate]], start: Coordinate, end: Coordinate
) -> float:
    """Length of the shortest simple walk, by exhaustive enumeration."""
    adjacency: dict[Coordinate, set[Coordinate]] = {}
    for a, b in edges:
        adjacency.setdefault(a, set()).add(b)
        adjacency.setdefault(b, set()).add(a)
    best = math.inf

    def walk(node: Coordinate, length: float, seen: set[Coordinate]) -> None:
        nonlocal best
        if node == end:
            best = min(best, length)
            return
        for nxt in adjacency[node]:
            if nxt not in seen:
                seen.add(nxt)
                walk(nxt, length + node.distance(nxt), seen)
                seen.remove(nxt)

    walk(start, 0.0, {start})
    return best


def resolve(
    graph: PlanarGraph, start: Coordinate, end: Coordinate, strategy: ResolverStrategy
) -> list[Coordinate]:
    return ShortestPathResolver(strategy, graph=graph).get_result(start, end)


def assert_walk(graph: PlanarGraph, path: list[Coordinate]) -> None:
    """Path follows graph edges and visits no vertex twice."""
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert graph.find_edge(a, b) is not None


@pytest.mark.parametrize("strategy", STRATEGIES)
class TestBoundaryGraphs:
    """Tests for minimal graphs."""

    def test_single_edge(self, strategy: ResolverStrategy) -> None:
        """One edge from start to end yields the two-point path."""
        a, b = Coordinate(1, 2), Coordinate(4, 6)
        graph = PlanarGraph()
        graph.add_edge(a, b)

        path = resolve(graph, a, b, strategy)

        assert path == [a, b]
        assert path_length(path) == pytest.approx(a.distance(b))

    def test_start_equals_end(self, strategy: ResolverStrategy) -> None:
        """Searching from a vertex to itself returns that vertex."""
        a, b = Coordinate(0, 0), Coordinate(1, 0)
        graph = PlanarGraph()
        graph.add_edge(a, b)

        assert resolve(graph, a, a, strategy) == [a]

    def test_traverses_against_insertion_direction(self, strategy: ResolverStrategy) -> None:
        """Segments are usable in both directions."""
        graph = PlanarGraph()
        graph.add_line(to_coordinates([(0, 0), (1, 0), (2, 0), (3, 1)]))

        path = resolve(graph, Coordinate(3, 1), Coordinate(0, 0), strategy)

        assert path == to_coordinates([(3, 1), (2, 0), (1, 0), (0, 0)])

    def test_prefers_shortcut(self, strategy: ResolverStrategy) -> None:
        """A diagonal is chosen over two sides of a square."""
        graph = PlanarGraph()
        graph.add_line(to_coordinates([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)]))
        graph.add_edge(Coordinate(0, 0), Coordinate(10, 10))

        path = resolve(graph, Coordinate(0, 0), Coordinate(10, 10), strategy)

        assert path == to_coordinates([(0, 0), (10, 10)])

    def test_loop_is_skipped(self, strategy: ResolverStrategy) -> None:
        """A noded loop hanging off the path is not traversed."""
        graph = PlanarGraph()
        graph.add_line(to_coordinates([(0, 0), (10, 0), (20, 0), (30, 0)]))
        graph.add_line(to_coordinates([(10, 0), (15, 5), (5, 5), (10, 0)]))

        path = resolve(graph, Coordinate(0, 0), Coordinate(30, 0), strategy)

        assert path == to_coordinates([(0, 0), (10, 0), (20, 0), (30, 0)])


@pytest.mark.parametrize("strategy", STRATEGIES)
class TestErrors:
    """Tests for precondition violations and unreachable targets."""

    def test_missing_start(self, strategy: ResolverStrategy) -> None:
        """Start coordinate absent from the graph."""
        graph = PlanarGraph()
        graph.add_edge(Coordinate(0, 0), Coordinate(1, 0))

        with pytest.raises(CoordinateNotFoundError) as exc_info:
            resolve(graph, Coordinate(5, 5), Coordinate(1, 0), strategy)
        assert exc_info.value.role == "start"

    def test_missing_end(self, strategy: ResolverStrategy) -> None:
        """End coordinate absent from the graph."""
        graph = PlanarGraph()
        graph.add_edge(Coordinate(0, 0), Coordinate(1, 0))

        with pytest.raises(CoordinateNotFoundError) as exc_info:
            resolve(graph, Coordinate(0, 0), Coordinate(1.0000001, 0), strategy)
        assert exc_info.value.role == "end"

    def test_disconnected_components(self, strategy: ResolverStrategy) -> None:
        """Start and end in separate components raise UnreachableTargetError."""
        graph = PlanarGraph()
        graph.add_line(to_coordinates([(0, 0), (1, 0), (1, 1)]))
        graph.add_line(to_coordinates([(5, 5), (6, 5)]))

        with pytest.raises(UnreachableTargetError) as exc_info:
            resolve(graph, Coordinate(0, 0), Coordinate(6, 5), strategy)

        assert isinstance(exc_info.value, DisconnectedGraphError)
        assert exc_info.value.committed_count == 3
        assert exc_info.value.end == Coordinate(6, 5)


class TestPriorityQueue:
    """Tests specific to the priority-queue strategy."""

    def test_stale_entries_discarded(self) -> None:
        """An improved vertex leaves an old heap entry that is skipped."""
        s, x, y, a, c = to_coordinates([(0, 0), (1, 0), (0, 2), (1, 5), (1, 20)])
        graph = PlanarGraph()
        for p, q in ((s, x), (s, y), (x, a), (y, a), (a, c)):
            graph.add_edge(p, q)

        resolver = ShortestPathResolver(ResolverStrategy.PRIORITY_QUEUE, graph=graph)
        path = resolver.get_result(s, c)

        assert path == [s, y, a, c]
        assert resolver.stats.stale_pops == 1
        assert resolver.stats.committed_count == 5

    def test_stats_recorded(self) -> None:
        """Search statistics describe the path."""
        graph = PlanarGraph()
        graph.add_line(to_coordinates([(0, 0), (3, 4), (6, 8)]))

        resolver = ShortestPathResolver(ResolverStrategy.PRIORITY_QUEUE, graph=graph)
        resolver.get_result((0, 0), (6, 8))

        assert resolver.stats.vertex_count == 3
        assert resolver.stats.path_vertex_count == 3
        assert resolver.stats.path_length == pytest.approx(10.0)
        assert resolver.stats.duration_ms >= 0.0


class TestStrategyAgreement:
    """Linear-scan and priority-queue strategies agree on path length."""

    @pytest.mark.parametrize(
        ("rows", "cols"),
        [(1, 5), (2, 3), (3, 4), (5, 5), (8, 10), (10, 20), (20, 25)],
    )
    @pytest.mark.parametrize("seed", [1, 7, 42])
    def test_equal_lengths_on_random_planar_graphs(self, rows: int, cols: int, seed: int) -> None:
        """Both strategies find equally short paths, or fail the same way."""
        graph, start, end = jittered_grid(rows, cols, seed)

        outcomes: list[float | type] = []
        for strategy in STRATEGIES:
            try:
                path = resolve(graph, start, end, strategy)
                assert path[0] == start
                assert path[-1] == end
                assert_walk(graph, path)
                outcomes.append(path_length(path))
            except PathError as e:
                outcomes.append(type(e))

        if isinstance(outcomes[0], float):
            assert outcomes[1] == pytest.approx(outcomes[0], rel=1e-9)
        else:
            assert outcomes[0] is outcomes[1]

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_idempotent(self, strategy: ResolverStrategy) -> None:
        """Repeated searches on identical input return identical paths."""
        first = resolve(*jittered_grid(10, 10, 3, keep=1.0), strategy)
        second = resolve(*jittered_grid(10, 10, 3, keep=1.0), strategy)
        assert first == second


class TestOptimality:
    """Resolved paths are no longer than any enumerable walk."""

    @pytest.mark.parametrize("n", [2, 4, 6, 8, 10, 12])
    @pytest.mark.parametrize("seed", range(5))
    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_matches_brute_force(self, n: int, seed: int, strategy: ResolverStrategy) -> None:
        """Path length equals the brute-force minimum."""
        graph, edges, start, end = random_graph(n, seed)
        expected = brute_force_shortest(edges, start, end)

        if math.isinf(expected):
            with pytest.raises(UnreachableTargetError):
                resolve(graph, start, end, strategy)
            return

        path = resolve(graph, start, end, strategy)
        assert_walk(graph, path)
        assert path_length(path) <= expected + 1e-9
        assert path_length(path) == pytest.approx(expected)


class TestGeometryInput:
    """Tests for adding shapely geometries to a resolver."""

    def test_find_path_multilinestring(self) -> None:
        """Line work split across parts is joined at shared vertices."""
        noded = MultiLineString([[(0, 0), (5, 0)], [(5, 0), (5, 5)], [(5, 0), (10, 0)]])

        result = find_path(noded, (0, 0), (10, 0), ResolverStrategy.PRIORITY_QUEUE)

        assert isinstance(result, LineString)
        assert list(result.coords) == [(0.0, 0.0), (5.0, 0.0), (10.0, 0.0)]

    def test_non_linear_components_ignored(self) -> None:
        """Points in a collection do not become vertices."""
        collection = GeometryCollection([LineString([(0, 0), (1, 1)]), Point(7, 7)])
        resolver = ShortestPathResolver()
        resolver.add(collection)

        assert resolver.graph.vertex_count == 2
        with pytest.raises(CoordinateNotFoundError):
            resolver.get_result((0, 0), (7, 7))

    def test_add_iterable(self) -> None:
        """Any number of geometries may be added."""
        resolver = ShortestPathResolver()
        resolver.add([LineString([(0, 0), (1, 0)]), LineString([(1, 0), (2, 0)])])

        assert resolver.get_result((0, 0), (2, 0)) == to_coordinates([(0, 0), (1, 0), (2, 0)])

    def test_result_cached_per_endpoints(self) -> None:
        """Repeated requests reuse the computed path."""
        resolver = ShortestPathResolver()
        resolver.add(LineString([(0, 0), (1, 0), (2, 0)]))

        first = resolver.get_result((0, 0), (2, 0))
        stats = resolver.stats
        second = resolver.get_result((0, 0), (2, 0))

        assert first == second
        assert resolver.stats is stats
        assert resolver.get_result((2, 0), (1, 0)) == to_coordinates([(2, 0), (1, 0)])

    def test_get_line_single_point_raises(self) -> None:
        """A single-vertex path cannot be a LineString."""
        resolver = ShortestPathResolver()
        resolver.add(LineString([(0, 0), (1, 0)]))
        with pytest.raises(ValueError):
            resolver.get_line((0, 0), (0, 0))
