"""Custom exception hierarchy for the Centsible reward engine."""

from __future__ import annotations


class CentsibleError(Exception):
    """Base class for all Centsible specific errors."""


class InvalidInputError(CentsibleError, ValueError):
    """Raised when a caller passes a negative amount, an out-of-range score or a malformed grade."""
