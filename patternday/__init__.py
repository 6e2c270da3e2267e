"""Small, runnable examples of the classic design patterns, one module each."""

__version__ = "0.1.0"