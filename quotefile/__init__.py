"""Quotes stored as JSON files: file handling, a resource life cycle and an HTML server."""

__version__ = "0.1.0"
__all__ = ["quote", "server", "provider"]