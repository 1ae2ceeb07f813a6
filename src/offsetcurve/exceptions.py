"""Exception hierarchy for Offsetcurve."""


class OffsetCurveError(Exception):
    """Base exception for all Offsetcurve errors."""

    pass


class InvalidOffsetInputError(OffsetCurveError):
    """Offset distance or input line is degenerate."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid offset input: {reason}")


class GeometryReadError(OffsetCurveError):
    """Error reading a line geometry from text or file."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to read geometry from '{source}': {reason}")


class PathError(OffsetCurveError):
    """Errors raised while resolving a path through a planar graph."""

    pass


class CoordinateNotFoundError(PathError):
    """Start or end coordinate is not a vertex of the graph."""

    def __init__(self, coordinate: object, role: str) -> None:
        self.coordinate = coordinate
        self.role = role
        super().__init__(f"{role.capitalize()} coordinate {coordinate} is not a graph vertex")


class UnreachableTargetError(PathError):
    """No path connects the start vertex to the end vertex."""

    def __init__(self, start: object, end: object, reason: str = "no path exists") -> None:
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(f"Cannot reach {end} from {start}: {reason}")


class DisconnectedGraphError(UnreachableTargetError):
    """Search frontier emptied before the end vertex was committed."""

    def __init__(self, start: object, end: object, committed_count: int) -> None:
        self.committed_count = committed_count
        super().__init__(
            start,
            end,
            reason=f"graph is disconnected ({committed_count} vertices reachable)",
        )
