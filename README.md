# giftwrap_hull

Concave hulls of 2D point clouds, computed with the gift opening algorithm.

The algorithm begins with the convex hull. It takes edges from longest to shortest.
An edge longer than the concavity limit is split by placing a point from the cloud
between its two ends. The point chosen is the one that keeps the largest angle to the
edge smallest. The split is skipped when that point is already on the boundary, or
when either new edge would cross an edge of the hull.

## Installation

```
pip install giftwrap_hull
```

## Library usage

```python
from giftwrap_hull.edge import Point
from giftwrap_hull.concave import concave_hull

points = [
    Point(141.0, 408.0), Point(160.0, 400.0), Point(177.0, 430.0),
    Point(151.0, 442.0), Point(155.0, 425.0), Point(134.0, 430.0),
    Point(126.0, 447.0), Point(139.0, 466.0), Point(160.0, 471.0),
]

hull = concave_hull(points, 40.0)
for index, point in hull:
    print(index, point.x, point.y)
```

`concave_hull(points, concavity)` accepts any sequence of `(x, y)` pairs. It returns
a list of `(index, Point)` pairs in counter-clockwise order, where `index` is the
position of the hull point in the input. The input should contain no duplicate points.
Here is how small inputs are handled:

- With zero or one point, the input is returned as it is.
- With two or three points, the result is the convex hull.
- `ValueError` is raised if the cloud has fewer than two distinct points, so no
  convex hull can be built.

### Modules

- `giftwrap_hull.edge`
  - `Point` is a named tuple `(x, y)` with `dot` and `norm_squared`.
  - `Edge` is a directed edge. `Edge.between(i, j, points)` builds one, and
    `norm_squared()` and `split_by(point, idx)` work on it. Two edges are equal when
    their indices are equal, and edges are ordered by length.
- `giftwrap_hull.segment_intersect.edges_intersect(e1, e2)` tests whether two edges
  cross.
  - Edges that meet head to tail do not count as crossing.
  - Duplicate edges do count.
- `giftwrap_hull.convex.convex_hull_indices(points)` computes the convex hull with
  quickhull and returns the indices in counter-clockwise order.
- `giftwrap_hull.drawing.draw_points_and_hull(points, hull, debug=False)` returns a
  Pillow RGB image.
  - The points are drawn in white.
  - The closed hull fades from red to pale pink along its winding order.
  - Coordinates are mirrored so that y points up. With `debug=True` they are not
    mirrored, and the canvas starts at the origin.
  - `ValueError` is raised for an empty point cloud.
- `giftwrap_hull.cli` provides `read_points(path, headers=False)`,
  `write_points(path, points)` and `main(argv=None)`.

## Choosing the concavity

- The concavity ranges from `0` to positive infinity.
- `0` gives the most crinkly shape possible.
- `math.inf` allows no concavity, so the result is the convex hull.
- `40` is usually a good place to start.

The concavity depends on scale. A cloud that spans 0 to 100 needs a smaller value than
the same cloud spanning 0 to 1000.

## Command line

```
giftwrap-hull CONCAVITY INPUT.csv [-p HULL.csv] [-i IMAGE.png] [-d]
```

- `INPUT.csv` holds one point per row, with the x column first and the y column second.
- `-p/--point-output` writes the hull points to a CSV file as `x,y` rows, in hull order.
- `-i/--img-output` draws the points and the hull to an image file.
- `-d/--headers` skips a header row in the input.
- `--version` prints the tool's version.

If no output is given, the tool reports that and stops. When an input or output file
fails to open, or a record is malformed, the tool prints the error to standard error
and exits with status 1.

Example:

```
giftwrap-hull 40 points.csv -p hull.csv -i hull.png
```

## Limitations

For every edge it splits, the algorithm scans the whole cloud and every edge of the
hull. Nothing uses a spatial index, so large clouds with a small concavity take a
long time to process.