"""Run command pipelines between files, with optional here-document input."""

__version__ = "1.0.0"
__all__ = ["__version__"]