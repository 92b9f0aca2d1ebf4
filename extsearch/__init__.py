"""Fixed-size record files searched by page index, on-disk binary tree and in-memory B-tree."""

__version__ = "0.1.0"

__all__ = ["__version__"]