"""Advent of Code 2024 puzzle solutions for days 1 to 5."""

__version__ = "0.1.0"
__all__ = ["cli", "day01", "day02", "day03", "day04", "day05", "inputs"]