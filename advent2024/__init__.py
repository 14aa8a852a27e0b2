"""Advent of Code 2024 solvers for days 3 to 5 and a sparse grid library."""

__version__ = "0.1.0"
__all__ = ["grid", "day03", "day04", "day05"]