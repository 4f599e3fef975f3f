"""Solutions to classic algorithm problems: bits, strings, trees, sequences, arrays, dynamic programming and graphs."""

__version__ = "0.1.0"
__all__ = ["arrays", "bits", "dynamic", "graphs", "sequences", "strings", "trees"]