[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hikefly"
version = "0.1.0"
description = "Terrain analysis for hike-and-fly paragliding: launch discovery, glide reachability, hiking cost and ranking on a DEM grid"
requires-python = ">=3.10"
dependencies = []
keywords = ["paragliding", "hike-and-fly", "dem", "terrain", "glide", "tobler", "dijkstra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
packages = ["hikefly"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
