"""Fractal art from a small instruction language, rendered to raster images."""

__version__ = "0.1.0"