"""RequestView ABC — read-only access to an inbound HTTP request."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Literal

Framework = Literal["django", "flask", "starlette", "asgi", "raw", "unknown"]


class RequestView(ABC):
    """Base class for every request adapter.

    The SDK never touches framework request objects directly.  They are
    wrapped once, at the boundary, in a view that answers three questions:
    what a header says, who the transport-level peer is, and which user
    agent sent the request.

    Attributes:
        framework: Which request shape the view was built from.
    """

    framework: Framework = "unknown"

    @abstractmethod
    def header(self, name: str) -> str | None:
        """Return the value of header *name*, or ``None`` if absent."""
        ...

    @abstractmethod
    def remote_ip(self) -> str | None:
        """Return the address of the directly connected peer."""
        ...

    def user_agent(self) -> str | None:
        return self.header("User-Agent")
