"""A pygame tile platformer for two characters, and the game logic of a zombie arena shooter."""

__version__ = "0.1.0"