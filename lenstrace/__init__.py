"""Lenstrace: reverse image search footprint analysis."""

__version__ = "0.1.0"
