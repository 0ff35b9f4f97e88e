"""Rendering of a point cloud and its hull as an RGB image."""

from __future__ import annotations

import math
from collections.abc import Sequence

from PIL import Image, ImageDraw

from .edge import Point

IMG_PADDING = 10.0
"""Padding added on each side so points do not touch the edge of the canvas."""

POINT_COLOR = (255, 255, 255)
FULL_SEGMENT_COLOR = (255, 0, 0)
FADED_SEGMENT_COLOR = (255, 200, 200)


def _interpolate(left: tuple[int, ...], right: tuple[int, ...], left_weight: float) -> tuple[int, ...]:
    """Blend two colours, giving ``left`` the weight ``left_weight``."""
    right_weight = 1.0 - left_weight
    return tuple(
        min(255, max(0, round(lc * left_weight + rc * right_weight)))
        for lc, rc in zip(left, right)
    )


def _draw_filled_circle(draw: ImageDraw.ImageDraw, center: tuple[int, int], radius: int, color) -> None:
    x, y = center
    draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=color)


def draw_points_and_hull(
    points: Sequence[Sequence[float]],
    hull: Sequence[Sequence[float]],
    debug: bool = False,
) -> Image.Image:
    """Draw ``points`` in white and the closed ``hull`` as a red-to-pink gradient.

    Unless ``debug`` is set, coordinates are mirrored vertically so that the
    image shows the mathematical (y-up) orientation. In debug mode the canvas
    starts at the origin instead of at the padded bounding box.

    Raises ValueError when ``points`` is empty.
    """
    pts = [Point(*p) for p in points]
    outline = [Point(*p) for p in hull]
    if not pts:
        raise ValueError("cannot draw an empty point cloud")

    if not debug:
        pts = [Point(p.x, -p.y) for p in pts]
        outline = [Point(p.x, -p.y) for p in outline]

    mins = Point(
        min(p.x for p in pts) - IMG_PADDING,
        min(p.y for p in pts) - IMG_PADDING,
    )
    maxs = Point(
        max(p.x for p in pts) + IMG_PADDING,
        max(p.y for p in pts) + IMG_PADDING,
    )
    if debug:
        mins = Point(0.0, 0.0)
    extents = maxs - mins
    point_size = int(max(max(extents.x, extents.y) / 250.0, 2.0))

    width = max(0, int(extents.x)) if math.isfinite(extents.x) else 0
    height = max(0, int(extents.y)) if math.isfinite(extents.y) else 0
    image = Image.new("RGB", (width, height))
    draw = ImageDraw.Draw(image)

    for point in pts:
        shifted = point - mins
        _draw_filled_circle(draw, (int(shifted.x), int(shifted.y)), point_size, POINT_COLOR)

    count = len(outline)
    for i, vertex in enumerate(outline):
        a = vertex - mins
        b = outline[(i + 1) % count] - mins
        color = _interpolate(FADED_SEGMENT_COLOR, FULL_SEGMENT_COLOR, i / count)
        _draw_filled_circle(draw, (int(a.x), int(a.y)), point_size, color)
        draw.line([(a.x, a.y), (b.x, b.y)], fill=color)

    return image