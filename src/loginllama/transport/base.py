"""Transport ABC — how the client talks to the LoginLlama API."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """Abstract base for HTTP backends.

    Implementations send JSON, attach the API key and SDK identification
    headers, and decode JSON replies.  They must raise
    :class:`~loginllama.exceptions.TransportError` on network failure or on
    any HTTP status >= 400.  Retries and timeouts are entirely their concern.
    """

    @abstractmethod
    async def get(self, path: str) -> Any:
        """GET *path* (relative to the base URL) and return the decoded body."""
        ...

    @abstractmethod
    async def post(self, path: str, body: dict[str, Any]) -> Any:
        """POST *body* as JSON to *path* and return the decoded body."""
        ...
