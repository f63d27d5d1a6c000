"""Introductory algorithms: recursion, frequency counting, text patterns and sorting."""

__version__ = "0.1.0"
__all__ = ["hashing", "patterns", "recursion", "sorting"]