"""Classic programming exercises as small, importable functions and classes."""

__version__ = "0.1.0"

__all__ = ["arrays", "cli", "files", "matrix", "numbers", "structures", "text"]