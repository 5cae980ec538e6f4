"""Formulas of school mathematics, with small demonstrations of closures and methods."""

__version__ = "0.1.0"

__all__ = [
    "algebra",
    "closures",
    "complex_numbers",
    "methods",
    "solid",
    "space",
    "statistics",
    "triangle",
    "trig",
    "vector",
]