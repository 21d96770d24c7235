"""Labelled matrices, matrix file reading and value enumeration."""

__version__ = "0.1.0"
__all__ = ["combinations", "matrix", "matrix_io"]