[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vtiler"
version = "0.1.0"
description = "Planar geometry types with JSON encoding, integer bounding boxes, linked lists, SVG debug drawing and GeoJSON tile export."
requires-python = ">=3.10"
dependencies = []
keywords = ["gis", "vector tiles", "geojson", "geometry", "svg", "bounding box"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vtiler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
