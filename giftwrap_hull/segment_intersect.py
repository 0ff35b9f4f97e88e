"""Intersection test for hull edges."""

from __future__ import annotations

from .edge import Edge


def edges_intersect(e1: Edge, e2: Edge) -> bool:
    """Tell whether two edges intersect.

    Edges sharing an endpoint head to tail do not count as intersecting;
    duplicate edges do. Distinct indices are assumed to be distinct points.
    """
    assert not (e1.i == e2.j and e2.i == e1.j), "found mirrored edges"
    assert not (e1.i == e2.i and e1.j != e2.j), "found V edges with shared i"
    assert not (e1.j == e2.j and e1.i != e2.i), "found V edges with shared j"

    if e1 == e2:
        return True
    if e1.i == e2.j or e2.i == e1.j:
        return False

    a, b = e1.point_i, e1.point_j
    c, d = e2.point_i, e2.point_j

    t_num = (a.x - c.x) * (c.y - d.y) - (a.y - c.y) * (c.x - d.x)
    denom = (a.x - b.x) * (c.y - d.y) - (a.y - b.y) * (c.x - d.x)
    u_num = -((a.x - b.x) * (a.y - c.y) - (a.y - b.y) * (a.x - c.x))

    # Both parameters must lie within [0, 1], checked without dividing.
    return (
        denom != 0
        and t_num * denom >= 0
        and abs(t_num) <= abs(denom)
        and u_num * denom >= 0
        and abs(u_num) <= abs(denom)
    )