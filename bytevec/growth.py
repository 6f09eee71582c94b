"""Capacity growth strategies for dynamic arrays."""

EXPONENTIAL_BASE_M = 3


def exponential_growth(n: int) -> int:
    """Double the capacity."""
    return n * 2


def exponential_m_growth(n: int) -> int:
    """Multiply the capacity by ``EXPONENTIAL_BASE_M``."""
    return n * EXPONENTIAL_BASE_M


def complete_binary_tree_growth(n: int) -> int:
    """Grow to the size of the next complete binary tree level."""
    return 1 + n * 2