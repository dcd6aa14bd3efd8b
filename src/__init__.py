"""Netflix catalog insight reports."""

__version__ = "1.0.0"
