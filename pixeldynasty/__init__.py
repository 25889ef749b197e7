"""Pixel sand simulation toolkit: quadtree, pygame application shell and text editing."""

__version__ = "0.1.0"