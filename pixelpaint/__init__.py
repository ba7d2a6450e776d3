"""A grid-based pixel art editor with pencil, eraser, paint bucket, HSV picker and PNG export."""

__version__ = "0.1.0"
__all__ = ["__version__"]