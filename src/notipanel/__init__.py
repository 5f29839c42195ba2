"""Client-side notification panel state."""

__version__ = "0.1.0"
