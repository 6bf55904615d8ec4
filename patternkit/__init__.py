"""Small, runnable implementations of twenty classic design patterns, with console demonstrations."""

__version__ = "0.1.0"