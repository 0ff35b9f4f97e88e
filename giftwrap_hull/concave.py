"""Concave hull of a planar point cloud, by gift opening."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from itertools import chain

from .convex import convex_hull_indices
from .edge import Edge, Point
from .segment_intersect import edges_intersect


class _EdgeHeap:
    """Max-heap of edges ordered by length, with a fixed tie-breaking order.

    The sift operations mirror a classic array-backed binary max-heap so that
    edges of equal length always come out in the same order.
    """

    def __init__(self) -> None:
        self._data: list[Edge] = []

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._data)

    def push(self, edge: Edge) -> None:
        self._data.append(edge)
        self._sift_up(0, len(self._data) - 1)

    def pop(self) -> Edge:
        item = self._data.pop()
        if self._data:
            item, self._data[0] = self._data[0], item
            self._sift_down_to_bottom(0)
        return item

    def _sift_up(self, start: int, pos: int) -> None:
        data = self._data
        element = data[pos]
        while pos > start:
            parent = (pos - 1) // 2
            if element <= data[parent]:
                break
            data[pos] = data[parent]
            pos = parent
        data[pos] = element

    def _sift_down_to_bottom(self, pos: int) -> None:
        data = self._data
        end = len(data)
        start = pos
        element = data[pos]
        child = 2 * pos + 1
        while child <= max(end - 2, 0):
            if data[child] <= data[child + 1]:
                child += 1
            data[pos] = data[child]
            pos = child
            child = 2 * pos + 1
        if child == end - 1:
            data[pos] = data[child]
            pos = child
        data[pos] = element
        self._sift_up(start, pos)


def _angle(a: Point, b: Point) -> float:
    """Unsigned angle between two vectors, zero if either has no length."""
    n1 = math.hypot(a.x, a.y)
    n2 = math.hypot(b.x, b.y)
    if n1 == 0.0 or n2 == 0.0:
        return 0.0
    cosine = a.dot(b) / (n1 * n2)
    if cosine > 1.0:
        return 0.0
    if cosine < -1.0:
        return math.pi
    return math.acos(cosine)


def _swap_remove(items: list[Edge], index: int) -> Edge:
    item = items[index]
    last = items.pop()
    if index < len(items):
        items[index] = last
    return item


def _best_split_point(edge: Edge, points: Sequence[Point]) -> tuple[int, Point]:
    best: tuple[int, Point] | None = None
    best_angle = 0.0
    direction = edge.point_j - edge.point_i
    for idx, point in enumerate(points):
        if idx in (edge.i, edge.j):
            continue
        angle = max(
            _angle(direction, point - edge.point_i),
            _angle(direction, edge.point_j - point),
        )
        if best is None or best_angle > angle:
            best, best_angle = (idx, point), angle
    if best is None:
        raise ValueError("point cloud has no point to split an edge with")
    return best


def _sort_end_to_end(edges: list[Edge]) -> list[Edge]:
    ordered: list[Edge] = []
    current = edges.pop()
    while edges:
        position = next(n for n, edge in enumerate(edges) if edge.i == current.j)
        following = _swap_remove(edges, position)
        ordered.append(current)
        current = following
    ordered.append(current)
    return ordered


def concave_hull(points: Sequence[Sequence[float]], concavity: float) -> list[tuple[int, Point]]:
    """Compute the concave hull of ``points``.

    ``concavity`` controls how tightly the hull wraps the cloud: ``0`` gives
    the tightest shape, ``math.inf`` the convex hull, and ``40`` is a good
    starting point. It is not scale invariant. Points are assumed distinct.

    Returns ``(index, point)`` pairs in counter-clockwise order.
    """
    pts = [Point(*p) for p in points]
    if len(pts) <= 1:
        return list(enumerate(pts))

    convex = convex_hull_indices(pts)
    if len(pts) <= 3:
        return [(idx, pts[idx]) for idx in convex]

    heap = _EdgeHeap()
    boundary: set[int] = set()
    for pos, i in enumerate(convex):
        j = convex[(pos + 1) % len(convex)]
        boundary.add(i)
        heap.push(Edge.between(i, j, pts))

    limit = concavity**2
    hull_edges: list[Edge] = []

    while heap:
        edge = heap.pop()
        if edge.norm_squared() > limit:
            idx, point = _best_split_point(edge, pts)
            if idx not in boundary:
                e1, e2 = edge.split_by(point, idx)
                if not any(
                    edges_intersect(other, e1) or edges_intersect(other, e2)
                    for other in chain(hull_edges, heap)
                ):
                    heap.push(e1)
                    heap.push(e2)
                    boundary.add(idx)
                    continue
        hull_edges.append(edge)

    return [(edge.i, edge.point_i) for edge in _sort_end_to_end(hull_edges)]