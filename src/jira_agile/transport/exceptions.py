"""Custom exceptions for the HTTP transport."""

from __future__ import annotations


class TransportError(Exception):
    """A request could not be completed or the server answered with an error status.

    Attributes:
        url: The request URL.
        status_code: HTTP status, or None when no response was received.
        body: Response body text (possibly truncated), if any.
    """

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        body: str = "",
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.body = body
