"""Custom exceptions for the Agile query layer."""

from __future__ import annotations


class AgileError(Exception):
    """Base exception for Agile query layer errors."""


class DeserializationError(AgileError):
    """Response body is not JSON or does not have the expected shape.

    Attributes:
        path: Location of the offending value, ``$``-rooted (e.g. ``$.values[2].id``).
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InvalidOptionsError(AgileError):
    """Query options could not be turned into a valid page request."""
