"""Procedural item generation and turn-based item combat."""

__version__ = "0.1.0"
