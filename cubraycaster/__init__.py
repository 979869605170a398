"""Raycasting engine that checks, renders and plays .cub scene files."""

__version__ = "0.1.0"
__all__ = ["__version__"]