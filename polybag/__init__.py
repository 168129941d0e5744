"""Decimal big integers, 2D integer vectors, and searchable bags with a set view."""

__version__ = "0.1.0"
__all__ = ["bigint", "vect2", "bags", "bagset", "cli"]