"""Solvers for Advent of Code puzzles from the 2023 and 2024 seasons."""

__version__ = "0.1.0"