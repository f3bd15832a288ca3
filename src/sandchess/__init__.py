"""Sandchess — a chess move-generation sandbox with a PyQt6 board."""

__version__ = "0.1.0"
