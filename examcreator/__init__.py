"""Exam Creator: author a subject's exam at the console and optionally take it."""

__version__ = "0.1.0"

__all__ = ["__version__"]
