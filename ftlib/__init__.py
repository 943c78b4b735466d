"""Classic C-library character, string, formatting and line-reading routines."""

__version__ = "0.1.0"
__all__ = ["chars", "strings", "transform", "output", "printf", "lines"]