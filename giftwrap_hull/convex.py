"""Convex hull of a planar point cloud, by quickhull."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field

from .edge import Point

_VISIBILITY_EPSILON = 100.0 * sys.float_info.epsilon


@dataclass
class _Facet:
    start: int
    end: int
    prev: int
    next: int
    normal: Point
    valid: bool
    visible: list[int] = field(default_factory=list)

    @classmethod
    def build(cls, start: int, end: int, prev: int, nxt: int, points: Sequence[Point]) -> _Facet:
        delta = points[end] - points[start]
        length = math.hypot(delta.x, delta.y)
        if length != 0.0:
            normal = Point(delta.y / length, -delta.x / length)
        else:
            normal = Point(delta.y, -delta.x)
        return cls(start, end, prev, nxt, normal, length != 0.0)

    def seen_by(self, idx: int, points: Sequence[Point]) -> bool:
        return (points[idx] - points[self.start]).dot(self.normal) > _VISIBILITY_EPSILON


def _support(direction: Point, points: Sequence[Point], candidates) -> int | None:
    best = None
    best_dot = -sys.float_info.max
    for idx in candidates:
        dot = direction.dot(points[idx])
        if dot > best_dot:
            best, best_dot = idx, dot
    return best


def _initial_facets(points: Sequence[Point], undecidable: list[int]) -> list[_Facet]:
    everything = range(len(points))
    first = _support(Point(1.0, 0.0), points, everything)
    second = first
    for direction in (Point(-1.0, 0.0), Point(0.0, -1.0), Point(0.0, 1.0)):
        second = _support(direction, points, everything)
        if (points[second] - points[first]).norm_squared() != 0.0:
            break
    if first is None or first == second:
        raise ValueError("cannot build the convex hull of this point cloud")

    f1 = _Facet.build(first, second, 1, 1, points)
    f2 = _Facet.build(second, first, 0, 0, points)
    for idx in everything:
        if idx in (first, second):
            continue
        if f1.seen_by(idx, points):
            f1.visible.append(idx)
        elif f2.seen_by(idx, points):
            f2.visible.append(idx)
        else:
            undecidable.append(idx)
    return [f1, f2]


def _attach(facet_id: int, apex: int, points: Sequence[Point], facets: list[_Facet], undecidable: list[int]) -> None:
    facet = facets[facet_id]
    id1 = len(facets)
    id2 = id1 + 1
    new1 = _Facet.build(facet.start, apex, facet.prev, id2, points)
    new2 = _Facet.build(apex, facet.end, id1, facet.next, points)
    facets[facet.prev].next = id1
    facets[facet.next].prev = id2

    for idx in facet.visible:
        if idx == apex:
            continue
        if new1.seen_by(idx, points):
            new1.visible.append(idx)
        elif new2.seen_by(idx, points):
            new2.visible.append(idx)

    pos = 0
    while pos < len(undecidable):
        idx = undecidable[pos]
        if new1.seen_by(idx, points):
            new1.visible.append(idx)
        elif new2.seen_by(idx, points):
            new2.visible.append(idx)
        else:
            pos += 1
            continue
        undecidable[pos] = undecidable[-1]
        undecidable.pop()

    facets.append(new1)
    facets.append(new2)


def convex_hull_indices(points: Sequence[Sequence[float]]) -> list[int]:
    """Return the indices of the convex hull of ``points`` in counter-clockwise order.

    Raises ValueError when fewer than two distinct points are given.
    """
    pts = [Point(*p) for p in points]
    if len(pts) < 2:
        raise ValueError("a convex hull needs at least two points")

    undecidable: list[int] = []
    facets = _initial_facets(pts, undecidable)

    current = 0
    while current < len(facets):
        facet = facets[current]
        if facet.valid:
            apex = _support(facet.normal, pts, facet.visible)
            if apex is not None:
                facet.valid = False
                _attach(current, apex, pts, facets, undecidable)
        current += 1

    first = next(n for n, facet in enumerate(facets) if facet.valid)
    hull = []
    current = first
    while True:
        facet = facets[current]
        if facet.valid:
            hull.append(facet.start)
        current = facet.next
        if current == first:
            break
    return hull