"""Concave hulls of 2D point clouds using the gift opening algorithm, with drawing and a command line tool."""

__version__ = "0.1.2"
__all__ = ["edge", "segment_intersect", "convex", "concave", "drawing", "cli"]