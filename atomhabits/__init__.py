"""Atom: a habit tracking HTTP API that stores habits in a PostgREST table."""

__version__ = "0.1.0"
__all__ = ["__version__"]