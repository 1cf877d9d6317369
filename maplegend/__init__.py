"""Map legend builder - turns a map's layer tree into a legend tree."""

__version__ = "0.1.0"
