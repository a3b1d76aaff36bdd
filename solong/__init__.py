"""A small tile-map game: walk a rectangular map of walls, floor and coins."""

__version__ = "0.1.0"