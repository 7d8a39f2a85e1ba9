"""Square integer and floating-point matrices read from text files, with a command-line report."""

__version__ = "0.1.0"
__all__ = ["matrices", "cli"]