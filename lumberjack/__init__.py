"""Log message value types and a curses table viewer with colour themes."""

__version__ = "0.1.0"