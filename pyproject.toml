[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "giftwrap_hull"
version = "0.1.2"
description = "Concave hulls of 2D point clouds using the gift opening algorithm"
requires-python = ">=3.10"
keywords = ["concave", "hull", "geometry", "convex", "polygon", "point cloud"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
giftwrap-hull = "giftwrap_hull.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["giftwrap_hull"]

[tool.pytest.ini_options]
addopts = "-ra"
