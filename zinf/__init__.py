"""A grid-based action game: clear each level of monsters with your sword."""

__version__ = "0.1.0"