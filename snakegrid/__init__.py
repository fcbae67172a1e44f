"""A grid-based snake game with a kept best score, selectable speeds and a Tk window."""

__version__ = "0.1.0"