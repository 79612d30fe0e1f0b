[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geesespotter"
version = "1.0.0"
description = "A terminal minesweeper-style puzzle: reveal every field without disturbing a goose."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "minesweeper", "terminal"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
geesespotter = "geesespotter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["geesespotter"]

[tool.pytest.ini_options]
addopts = "-ra"
