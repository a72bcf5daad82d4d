"""List directory contents as a tree, with a description beside each entry."""

__version__ = "1.1.0"
__all__ = ["__version__"]