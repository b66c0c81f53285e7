"""Header-accessor views — requests that expose a ``headers`` collection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loginllama.views.base import Framework, RequestView


class HeadersView(RequestView):
    """View over any ``headers.get(name)`` accessor.

    Works with Starlette/FastAPI, werkzeug, httpx and aiohttp header
    collections, all of which look names up case-insensitively.  A plain
    ``dict`` is matched case-insensitively as a fallback.
    """

    def __init__(
        self,
        headers: Any,
        client_ip: str | None = None,
        framework: Framework = "unknown",
    ) -> None:
        self._headers = headers
        self._client_ip = client_ip
        self.framework = framework

    def header(self, name: str) -> str | None:
        value = self._headers.get(name)
        if value is None and isinstance(self._headers, dict):
            lowered = name.lower()
            for key, candidate in self._headers.items():
                if isinstance(key, str) and key.lower() == lowered:
                    value = candidate
                    break
        return value if isinstance(value, str) else None

    def remote_ip(self) -> str | None:
        return self._client_ip


class ScopeView(RequestView):
    """View over a raw ASGI HTTP ``scope``."""

    framework: Framework = "asgi"

    def __init__(self, scope: Mapping[str, Any]) -> None:
        self._scope = scope
        headers: dict[str, str] = {}
        for raw_name, raw_value in scope.get("headers") or []:
            name = raw_name.decode("latin-1").lower()
            # Repeated headers are joined the way proxies fold them.
            value = raw_value.decode("latin-1")
            headers[name] = f"{headers[name]}, {value}" if name in headers else value
        self._headers = headers

    def header(self, name: str) -> str | None:
        return self._headers.get(name.lower())

    def remote_ip(self) -> str | None:
        client = self._scope.get("client")
        if client:
            return str(client[0])
        return None
