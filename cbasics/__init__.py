"""Small data structures, algorithms and command-line tools."""

__version__ = "0.1.0"