"""A falling-block puzzle game for the terminal: game rules, curses display and game loop."""

__version__ = "0.2.0"
__all__ = ["__version__"]