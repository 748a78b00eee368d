"""Sunday Edition: weekly per-neighborhood editorial synthesis pipeline."""

__version__ = "0.1.0"
__author__ = "Flaneur Team"

__all__ = ["__version__", "__author__"]
