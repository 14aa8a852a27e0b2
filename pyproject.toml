[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "0.1.0"
description = "Solvers for several Advent of Code 2024 puzzles, plus a small sparse grid library"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc2024", "grid"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2024-day03 = "advent2024.day03:main"
advent2024-day04 = "advent2024.day04:main"
advent2024-day05 = "advent2024.day05:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
