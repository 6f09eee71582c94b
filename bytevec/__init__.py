"""Growable vectors of fixed-size byte elements, with growth strategies, comparison and swap helpers."""

__version__ = "0.1.0"
__all__ = ["compare", "growth", "memory", "vector"]