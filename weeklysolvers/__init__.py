"""Solvers for weekly algorithm exercises, with a command line front end."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "counting",
    "dsu",
    "geometry",
    "number_theory",
    "segment_tree",
    "sequences",
    "strings",
]