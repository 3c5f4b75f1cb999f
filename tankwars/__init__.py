"""Simulation core of a 2D artillery tank game: terrain, tanks, enemies, shells, fireworks and transforms."""

__version__ = "0.1.0"