"""Advent of Code 2021 puzzle solutions for days 1 to 5, with an input fetcher and a command line."""

__version__ = "0.1.0"