"""A turn-based battle simulator: game rules, text rendering and a terminal game."""

__version__ = "0.1.0"
__all__ = ["__version__"]