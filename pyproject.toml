[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilerogue"
version = "0.1.0"
description = "Grid positions, spell definitions and an anchor-based widget layout for a tile-based roguelike"
requires-python = ">=3.10"
dependencies = []
keywords = ["roguelike", "game", "tiles", "spells", "ui", "layout", "widgets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tilerogue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
