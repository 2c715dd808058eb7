"""Small data structures, algorithms, a toy fern simulation and command-line tools."""

__version__ = "0.1.0"