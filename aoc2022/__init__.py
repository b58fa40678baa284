"""Solvers for the 2022 Advent of Code puzzles, days 15 to 23, and a day 19 simulator."""

__version__ = "0.1.0"