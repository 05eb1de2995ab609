"""Declutter - folder cleanup assistant backend."""

__version__ = "0.1.0"
