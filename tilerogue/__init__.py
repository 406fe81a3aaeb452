"""Grid positions, spell definitions, a tile grid and widget layout for a tile-based roguelike."""

__version__ = "0.1.0"