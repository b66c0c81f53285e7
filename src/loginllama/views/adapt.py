"""Turn whatever the caller calls "the request" into a :class:`RequestView`."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from loginllama.views.base import RequestView
from loginllama.views.environ import EnvironView
from loginllama.views.headers import HeadersView, ScopeView


def _is_asgi_scope(value: Mapping[str, Any]) -> bool:
    return value.get("type") in ("http", "websocket") and isinstance(
        value.get("headers"), list | tuple
    )


def _client_host(request: Any) -> str | None:
    client = getattr(request, "client", None)
    host = getattr(client, "host", None)
    return host if isinstance(host, str) else None


def as_view(request: Any) -> RequestView | None:
    """Resolve *request* to a view.  First match wins:

    * an existing :class:`RequestView` is returned unchanged
    * ``None`` stays ``None``
    * Starlette / FastAPI requests and websockets use ``request.headers``
      and ``request.client``
    * an ASGI HTTP or websocket scope becomes a :class:`ScopeView`
    * any other mapping is treated as CGI/WSGI metadata (``"raw"``)
    * Django requests are viewed through ``request.META``
    * Flask / Werkzeug requests are viewed through ``request.environ``
    * anything else with ``headers`` gets a generic header view
    * otherwise an empty view with framework ``"unknown"``
    """
    if request is None or isinstance(request, RequestView):
        return request

    # Starlette connections are Mappings over their scope; catch them first.
    scope = getattr(request, "scope", None)
    headers = getattr(request, "headers", None)
    if isinstance(scope, Mapping) and headers is not None and hasattr(headers, "get"):
        return HeadersView(headers, _client_host(request), framework="starlette")

    if isinstance(request, Mapping):
        if _is_asgi_scope(request):
            return ScopeView(request)
        return EnvironView(request)

    meta = getattr(request, "META", None)
    if isinstance(meta, Mapping):
        return EnvironView(meta, framework="django")

    environ = getattr(request, "environ", None)
    if isinstance(environ, Mapping):
        return EnvironView(environ, framework="flask")

    if headers is not None and hasattr(headers, "get"):
        return HeadersView(headers, _client_host(request))

    return HeadersView({})
