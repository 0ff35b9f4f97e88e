"""Points and directed hull edges."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    """A point, or a vector, in the plane."""

    x: float
    y: float

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def dot(self, other: Point) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def norm_squared(self) -> float:
        """Squared Euclidean length."""
        return self.dot(self)


@dataclass(eq=False)
class Edge:
    """A directed edge between two points of a point cloud.

    Edges are equal when their indices are equal, and are ordered by length.
    """

    i: int
    j: int
    point_i: Point
    point_j: Point

    @classmethod
    def between(cls, i: int, j: int, points: Sequence[Sequence[float]]) -> Edge:
        """Build the edge from ``points[i]`` to ``points[j]``."""
        return cls(i, j, Point(*points[i]), Point(*points[j]))

    def norm_squared(self) -> float:
        """Squared length of the edge."""
        return (self.point_j - self.point_i).norm_squared()

    def split_by(self, point: Sequence[float], idx: int) -> tuple[Edge, Edge]:
        """Split the edge in two by inserting ``point`` (with index ``idx``) in the middle."""
        middle = Point(*point)
        return (
            Edge(self.i, idx, self.point_i, middle),
            Edge(idx, self.j, middle, self.point_j),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.i == other.i and self.j == other.j

    def __hash__(self) -> int:
        return hash((self.i, self.j))

    def __lt__(self, other: Edge) -> bool:
        return self.norm_squared() < other.norm_squared()

    def __gt__(self, other: Edge) -> bool:
        return self.norm_squared() > other.norm_squared()

    def __le__(self, other: Edge) -> bool:
        return self.norm_squared() <= other.norm_squared()

    def __ge__(self, other: Edge) -> bool:
        return self.norm_squared() >= other.norm_squared()