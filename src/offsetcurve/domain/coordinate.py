"""Coordinate primitive used as the vertex key of planar graphs."""

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Coordinate:
    """An immutable point in 2D space.

    Equality and hashing use the exact x and y values with no tolerance,
    so two coordinates identify the same graph vertex only if they are
    bit-for-bit equal as floats.

    Attributes:
        x: X ordinate
        y: Y ordinate
    """

    x: float
    y: float

    def distance(self, other: "Coordinate") -> float:
        """Euclidean distance to another coordinate."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Coordinate":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Coordinate instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))

    @classmethod
    def of(cls, value: "Coordinate | Sequence[float]") -> "Coordinate":
        """Coerce an (x, y) pair or a Coordinate to a Coordinate.

        Extra ordinates (e.g. Z) are ignored.

        Raises:
            ValueError: If fewer than two ordinates are given
        """
        if isinstance(value, Coordinate):
            return value
        if len(value) < 2:
            raise ValueError(f"Expected at least 2 ordinates, got {len(value)}")
        return cls(float(value[0]), float(value[1]))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def to_coordinates(values: Iterable["Coordinate | Sequence[float]"]) -> list[Coordinate]:
    """Coerce an iterable of points to a list of Coordinates."""
    return [Coordinate.of(v) for v in values]


def path_length(coords: Sequence[Coordinate]) -> float:
    """Sum of Euclidean segment lengths along a coordinate sequence."""
    return sum(coords[i - 1].distance(coords[i]) for i in range(1, len(coords)))
