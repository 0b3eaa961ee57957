"""
Error taxonomy for the drawings client.

Every failure surfaces as a subclass of :class:`DrawingsError` so callers
can catch the whole family with one ``except`` clause, or pick out the
specific kind they care about.
"""

from __future__ import annotations


class DrawingsError(Exception):
    """Base class for all drawing builder / parser / transport failures."""


class ValidationError(DrawingsError):
    """Raised when a required field is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class AuthError(DrawingsError):
    """Raised when an access token cannot be issued."""


class ApiError(DrawingsError):
    """Raised when the storage API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str = "") -> None:
        message = f"API Error {status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class RequestError(DrawingsError):
    """Raised when the HTTP call itself fails (network, timeout, …)."""


class ParseError(DrawingsError):
    """Raised when a server response does not have the expected shape."""
