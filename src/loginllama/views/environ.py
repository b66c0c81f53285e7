"""EnvironView — CGI / WSGI style ``HTTP_*`` key-value metadata."""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from loginllama.views.base import Framework, RequestView


def environ_key(header: str) -> str:
    """Translate a header name to its CGI variable, e.g. ``HTTP_X_REAL_IP``."""
    return "HTTP_" + header.replace("-", "_").upper()


class EnvironView(RequestView):
    """View over a flat metadata mapping such as a WSGI ``environ``,
    Django's ``request.META`` or the process environment of a CGI script.
    """

    def __init__(self, environ: Mapping[str, Any], framework: Framework = "raw") -> None:
        self._environ = environ
        self.framework = framework

    @property
    def environ(self) -> Mapping[str, Any]:
        return self._environ

    def _get(self, key: str) -> str | None:
        value = self._environ.get(key)
        return value if isinstance(value, str) else None

    def header(self, name: str) -> str | None:
        return self._get(environ_key(name))

    def remote_ip(self) -> str | None:
        return self._get("REMOTE_ADDR")

    def user_agent(self) -> str | None:
        return self._get("HTTP_USER_AGENT")


def ambient_view() -> EnvironView:
    """Return the process-wide fallback view over ``os.environ``.

    Under CGI the web server exports ``REMOTE_ADDR``, ``HTTP_USER_AGENT``
    and friends as environment variables; elsewhere the lookups are empty.
    """
    return EnvironView(os.environ)
