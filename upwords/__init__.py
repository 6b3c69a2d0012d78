"""Board state, tile stacking and placement checks for an Upwords-style word game."""

__version__ = "0.1.0"
__all__ = ["game"]