"""Middleware that records the current request in a :class:`ContextStore`.

Both classes reset the store once the request is done (for WSGI, when the
response is closed), so the context of one request never leaks into the
next one served by the same task or thread.

ASGI (Starlette, FastAPI, Quart, ...)::

    app.add_middleware(ContextMiddleware)

WSGI (Flask, Django, ...)::

    app.wsgi_app = WSGIContextMiddleware(app.wsgi_app)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator, MutableMapping
from contextvars import Token
from typing import Any

from loginllama.context import ContextStore, default_store
from loginllama.views import EnvironView, ScopeView

Scope = MutableMapping[str, Any]
Receive = Callable[[], Awaitable[MutableMapping[str, Any]]]
Send = Callable[[MutableMapping[str, Any]], Awaitable[None]]
ASGIApp = Callable[[Scope, Receive, Send], Awaitable[None]]


class ContextMiddleware:
    """Pure ASGI middleware; only ``http`` scopes are recorded."""

    def __init__(self, app: ASGIApp, store: ContextStore | None = None) -> None:
        self.app = app
        self.store = store or default_store

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        token = self.store.set(ScopeView(scope))
        try:
            await self.app(scope, receive, send)
        finally:
            self.store.reset(token)


class _ClosingIterable:
    """Response body that resets the store when the server closes it."""

    def __init__(self, body: Iterable[bytes], store: ContextStore, token: Token[Any]) -> None:
        self._body = body
        self._store = store
        self._token = token

    def __iter__(self) -> Iterator[bytes]:
        return iter(self._body)

    def close(self) -> None:
        try:
            close = getattr(self._body, "close", None)
            if close is not None:
                close()
        finally:
            self._store.reset(self._token)


class WSGIContextMiddleware:
    """WSGI middleware recording ``environ`` until the response is closed.

    The context stays visible while a streaming body is iterated.  The
    server must call ``close()`` on the returned iterable from the thread
    that handled the request, as PEP 3333 servers do.
    """

    def __init__(self, app: Callable[..., Iterable[bytes]], store: ContextStore | None = None) -> None:
        self.app = app
        self.store = store or default_store

    def __call__(self, environ: dict[str, Any], start_response: Callable[..., Any]) -> Iterable[bytes]:
        token = self.store.set(EnvironView(environ))
        try:
            body = self.app(environ, start_response)
        except BaseException:
            self.store.reset(token)
            raise
        return _ClosingIterable(body, self.store, token)
