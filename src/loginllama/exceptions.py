"""Custom exceptions for the loginllama package."""

from __future__ import annotations


class LoginLlamaError(Exception):
    """Base exception for all loginllama errors."""


class ValidationError(LoginLlamaError, ValueError):
    """Raised when a check cannot be sent because an input is missing or invalid.

    Always raised before any network call is made.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class TransportError(LoginLlamaError):
    """Raised when the API cannot be reached or answers with HTTP >= 400."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)
