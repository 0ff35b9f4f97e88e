"""Command line tool: compute a concave hull from a CSV file of points."""

from __future__ import annotations

import argparse
import csv
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from .concave import concave_hull
from .drawing import draw_points_and_hull
from .edge import Point


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def read_points(path, headers: bool = False) -> list[Point]:
    """Read points from a CSV file whose first two columns are x and y.

    Raises ValueError on a malformed record.
    """
    points = []
    with open(path, newline="") as handle:
        rows = csv.reader(handle)
        if headers:
            next(rows, None)
        for line_no, row in enumerate(rows, start=2 if headers else 1):
            if not row:
                continue
            if len(row) < 2:
                raise ValueError(f"record {line_no} has fewer than two fields")
            try:
                points.append(Point(float(row[0]), float(row[1])))
            except ValueError as exc:
                raise ValueError(f"record {line_no}: {exc}") from exc
    return points


def write_points(path, points: Iterable[Sequence[float]]) -> None:
    """Write points to a CSV file as x,y records."""
    with open(path, "w", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        for x, y in points:
            writer.writerow([_format_number(x), _format_number(y)])


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="giftwrap-hull",
        description="Basic CLI to interface with the concave hull library",
    )
    parser.add_argument("--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("concavity", type=float, help="Concavity parameter to use")
    parser.add_argument(
        "input", help="Path to input CSV file, with an x column and y column (in order)"
    )
    parser.add_argument(
        "-p", "--point-output", help="Path to output a CSV of hull points to"
    )
    parser.add_argument(
        "-i", "--img-output", help="Path to output a PNG image of the points and hull to"
    )
    parser.add_argument(
        "-d", "--headers", action="store_true", help="Whether the input CSV has headers"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    args = _parser().parse_args(argv)
    input_path = Path(args.input)
    point_output = Path(args.point_output) if args.point_output else None
    img_output = Path(args.img_output) if args.img_output else None

    print(
        f"Generating concave hull for {input_path} "
        f"[concavity: {_format_number(args.concavity)}]"
    )

    try:
        in_points = read_points(input_path, args.headers)
        hull = concave_hull(in_points, args.concavity)

        if point_output is None and img_output is None:
            print("No output file provided. Terminating.")

        if point_output is not None:
            print(f'Writing concave hull points to "{point_output}"')
            write_points(point_output, (point for _, point in hull))

        if img_output is not None:
            print(f'Drawing image of points and hull at "{img_output}"')
            image = draw_points_and_hull(in_points, [point for _, point in hull], False)
            image.save(img_output)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())