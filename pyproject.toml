[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knightquest"
version = "0.1.0"
description = "A small tile-based arcade game: guide a knight through a walled map, collect every item, slay patrolling enemies and reach the exit."
requires-python = ">=3.10"
keywords = ["game", "arcade", "tile map", "pygame", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
knightquest = "knightquest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["knightquest"]

[tool.pytest.ini_options]
addopts = "-ra"
