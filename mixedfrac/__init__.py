"""Mixed-number fractions with parsing, and points on a plane."""

__version__ = "0.1.0"
__all__ = ["fraction", "point"]