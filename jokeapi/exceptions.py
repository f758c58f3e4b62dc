"""Errors raised by the JokeAPI client."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import ErrorResponse


class JokeAPIError(Exception):
    """Base class for every error raised by this package."""


class InvalidValueError(JokeAPIError, ValueError):
    """Raised when a raw string is not part of a closed vocabulary."""

    def __init__(self, kind: str, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f'invalid {kind}: "{value}"')


class TransportError(JokeAPIError):
    """Raised when the HTTP request itself fails."""

    def __init__(self, message: str, source: Optional[Exception] = None):
        self.message = message
        self.source = source
        super().__init__(message)


class DecodeError(JokeAPIError, ValueError):
    """Raised when a response body cannot be decoded into jokes."""


class APIError(JokeAPIError):
    """A well-formed error payload returned by the service."""

    def __init__(self, response: "ErrorResponse"):
        self.response = response
        self.code = response.code
        super().__init__(f"{response.message}: {response.info}")
