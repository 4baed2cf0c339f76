[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilegame"
version = "0.1.0"
description = "Logic core of a tile-based world game: grid layers, heat conduction, 2D geometry and input handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "tiles", "simulation", "heat", "geometry", "polygon"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
