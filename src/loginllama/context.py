"""RequestContext and the store that carries it from middleware to ``check``."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Any

from loginllama.ip import resolve_ip
from loginllama.views import Framework, RequestView, ambient_view, as_view

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Signals extracted once from an inbound request.

    Attributes:
        ip_address: Best-guess client IP (see :func:`loginllama.ip.resolve_ip`).
        user_agent: ``User-Agent`` header of the request.
        framework:  Which request shape the values were read from.
        raw_view:   The view the values were extracted from.
    """

    ip_address: str | None = None
    user_agent: str | None = None
    framework: Framework = "unknown"
    raw_view: RequestView | None = None


def extract_context(request: Any) -> RequestContext:
    """Build a :class:`RequestContext` from a request object, mapping or view."""
    view = as_view(request)
    if view is None:
        return RequestContext()
    return RequestContext(
        ip_address=resolve_ip(view),
        user_agent=view.user_agent() or None,
        framework=view.framework,
        raw_view=view,
    )


class ContextStore:
    """Holds the context of the request currently being served.

    Backed by a :class:`~contextvars.ContextVar`, so every asyncio task and
    every thread sees its own value: concurrent requests handled by one
    process never observe each other's context.  Within one task the store
    holds a single value and the last ``set`` wins.

    Parameters:
        ambient: Zero-argument callable returning the view used when
                 ``set`` is called without a request.  Defaults to
                 :func:`loginllama.views.ambient_view`.
    """

    def __init__(
        self,
        name: str = "loginllama_request_context",
        ambient: Callable[[], RequestView | None] = ambient_view,
    ) -> None:
        self._var: ContextVar[RequestContext | None] = ContextVar(name, default=None)
        self._ambient = ambient

    def set(self, request: Any = None) -> Token[RequestContext | None]:
        """Extract a fresh context from *request* and make it current.

        Returns a token that :meth:`reset` accepts to restore the previous value.
        """
        if request is None:
            request = self._ambient()
        context = extract_context(request)
        logger.debug("Stored request context (framework=%s)", context.framework)
        return self._var.set(context)

    def get(self) -> RequestContext | None:
        return self._var.get()

    def clear(self) -> None:
        self._var.set(None)

    def reset(self, token: Token[RequestContext | None]) -> None:
        self._var.reset(token)


default_store = ContextStore()


def set_context(request: Any = None) -> Token[RequestContext | None]:
    return default_store.set(request)


def get_context() -> RequestContext | None:
    return default_store.get()


def clear_context() -> None:
    default_store.clear()
