"""Console tools for long division, a literature catalogue and sparse matrices."""

__version__ = "0.1.0"