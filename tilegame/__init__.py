"""Logic core of a tile-based world game: layers, heat conduction, geometry and controls."""

__version__ = "0.1.0"
__all__ = ["geometry", "polygon", "simulation", "states", "controls", "world"]