"""Create source files from project script templates."""

__version__ = "0.1.0"
