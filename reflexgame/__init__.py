"""Reaction-time target game logic: settings, single and timed rounds."""

__version__ = "0.1.0"
__all__ = ["__version__"]