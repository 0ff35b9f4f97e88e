import math

import pytest

from giftwrap_hull.concave import concave_hull
from giftwrap_hull.convex import convex_hull_indices
from giftwrap_hull.edge import Edge, Point
from giftwrap_hull.segment_intersect import edges_intersect

# Numpad grid:
# 7 8 9
# 4 5 6
# 1 2 3
# 0
NUMPAD = [
    Point(0.0, 0.0),
    Point(0.0, 1.0),
    Point(1.0, 1.0),
    Point(2.0, 1.0),
    Point(0.0, 2.0),
    Point(1.0, 2.0),
    Point(2.0, 2.0),
    Point(0.0, 3.0),
    Point(1.0, 3.0),
    Point(2.0, 3.0),
]

POLYGON = [
    (141.0, 408.0),
    (160.0, 400.0),
    (177.0, 430.0),
    (151.0, 442.0),
    (155.0, 425.0),
    (134.0, 430.0),
    (126.0, 447.0),
    (139.0, 466.0),
    (160.0, 471.0),
    (167.0, 447.0),
    (182.0, 466.0),
    (192.0, 442.0),
    (187.0, 413.0),
    (173.0, 403.0),
    (165.0, 430.0),
    (171.0, 430.0),
    (177.0, 437.0),
    (175.0, 443.0),
    (172.0, 444.0),
    (163.0, 448.0),
    (156.0, 447.0),
    (153.0, 438.0),
    (154.0, 431.0),
    (160.0, 428.0),
]


def _signed_area(points):
    total = 0.0
    for k, (x1, y1) in enumerate(points):
        x2, y2 = points[(k + 1) % len(points)]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def test_zero_points():
    assert concave_hull(NUMPAD[0:0], 10.0) == []


def test_one_point():
    assert concave_hull(NUMPAD[0:1], 10.0) == [(0, NUMPAD[0])]


def test_two_points():
    assert concave_hull(NUMPAD[0:2], 10.0) == [(0, NUMPAD[0]), (1, NUMPAD[1])]


def test_three_points():
    assert concave_hull(NUMPAD[0:3], 10.0) == [
        (0, NUMPAD[0]),
        (2, NUMPAD[2]),
        (1, NUMPAD[1]),
    ]


def test_square():
    hull = concave_hull([NUMPAD[1], NUMPAD[2], NUMPAD[4], NUMPAD[5]], 10.0)
    assert hull == [
        (2, NUMPAD[4]),
        (0, NUMPAD[1]),
        (1, NUMPAD[2]),
        (3, NUMPAD[5]),
    ]


def test_accepts_plain_tuples():
    hull = concave_hull([(0.0, 1.0), (1.0, 1.0), (0.0, 2.0), (1.0, 2.0)], 10.0)
    assert [idx for idx, _ in hull] == [2, 0, 1, 3]
    assert hull[0][1] == Point(0.0, 2.0)


def test_coincident_points_rejected():
    with pytest.raises(ValueError):
        concave_hull([(1.0, 1.0), (1.0, 1.0)], 10.0)


def test_infinite_concavity_gives_convex_hull():
    hull = concave_hull(POLYGON, math.inf)
    indices = [idx for idx, _ in hull]
    expected = convex_hull_indices(POLYGON)
    assert len(indices) == len(expected)
    assert expected[0] in indices
    start = indices.index(expected[0])
    assert indices[start:] + indices[:start] == expected


@pytest.mark.parametrize("concavity", [0.0, 10.0, 40.0, math.inf])
def test_returned_points_match_input(concavity):
    hull = concave_hull(POLYGON, concavity)
    assert all(point == Point(*POLYGON[idx]) for idx, point in hull)
    indices = [idx for idx, _ in hull]
    assert len(set(indices)) == len(indices)


@pytest.mark.parametrize("concavity", [0.0, 10.0, 40.0])
def test_convex_vertices_stay_on_hull(concavity):
    hull = concave_hull(POLYGON, concavity)
    assert set(convex_hull_indices(POLYGON)) <= {idx for idx, _ in hull}


@pytest.mark.parametrize("concavity", [0.0, 10.0, 40.0, math.inf])
def test_hull_is_counter_clockwise(concavity):
    hull = concave_hull(POLYGON, concavity)
    assert _signed_area([point for _, point in hull]) > 0.0


@pytest.mark.parametrize("concavity", [0.0, 10.0, 40.0])
def test_hull_is_simple_polygon(concavity):
    hull = concave_hull(POLYGON, concavity)
    indices = [idx for idx, _ in hull]
    n = len(indices)
    edges = [Edge.between(indices[k], indices[(k + 1) % n], POLYGON) for k in range(n)]
    for a in range(n):
        for b in range(a + 2, n):
            if a == 0 and b == n - 1:
                continue
            assert not edges_intersect(edges[a], edges[b])


def test_zero_concavity_is_tighter_than_convex():
    tight = concave_hull(POLYGON, 0.0)
    loose = concave_hull(POLYGON, math.inf)
    assert len(tight) > len(loose)
    assert _signed_area([p for _, p in tight]) < _signed_area([p for _, p in loose])


def test_numpad_cloud_hull_is_closed_cycle():
    hull = concave_hull(NUMPAD, 0.0)
    indices = [idx for idx, _ in hull]
    assert len(set(indices)) == len(indices)
    assert {0, 3, 7, 9} <= set(indices)
    assert _signed_area([p for _, p in hull]) > 0.0