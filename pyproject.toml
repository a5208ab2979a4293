[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minefield"
version = "0.1.0"
description = "Terminal minesweeper played with the mouse in a curses window"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "curses", "terminal", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
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
minefield = "minefield.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minefield"]

[tool.pytest.ini_options]
addopts = "-ra"
