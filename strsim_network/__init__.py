"""Pairwise string similarity networks as sparse matrices and graphs."""

__version__ = "0.1.0"
