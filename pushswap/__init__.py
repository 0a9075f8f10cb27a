"""Two-stack integer sorting with a limited instruction set, and a checker."""

__version__ = "1.0.0"
__all__ = ["__version__"]