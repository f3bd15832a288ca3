"""Exceptions raised by the core layer.

All derive from :class:`ValueError` so callers that already guard
parsing with ``except ValueError`` keep working.
"""

from __future__ import annotations


class ChessError(ValueError):
    """Base class for engine errors."""


class InvalidPosition(ChessError):
    """Square text or indices do not name one of the 64 cells."""


class InvalidParameter(ChessError):
    """Malformed argument to a construction or setup call."""


class IllegalMoveRequested(ChessError):
    """A move was requested to a square outside the legal destinations."""
