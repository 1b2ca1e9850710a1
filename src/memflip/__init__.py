"""Memory Flip: a timed tile-matching memory game."""

__version__ = "0.1.0"
