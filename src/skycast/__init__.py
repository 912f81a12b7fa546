"""Skycast - cache-first weather location search and forecast lookup."""

__version__ = "0.1.0"
