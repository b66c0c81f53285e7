"""Tests for as_view framework detection."""

from collections.abc import Mapping
from types import SimpleNamespace

from loginllama.context import extract_context
from loginllama.views import EnvironView, HeadersView, ScopeView, as_view


class FakeDjangoRequest:
    def __init__(self, meta):
        self.META = meta


class FakeFlaskRequest:
    def __init__(self, environ):
        self.environ = environ
        self.headers = {}


class FakeStarletteRequest:
    def __init__(self, headers, host):
        self.scope = {"type": "http"}
        self.headers = headers
        self.client = SimpleNamespace(host=host)


class FakeConnection(Mapping):
    """Mirrors Starlette's HTTPConnection, which is a Mapping over its scope."""

    def __init__(self, scope):
        self.scope = scope
        self.headers = {name.decode(): value.decode() for name, value in scope["headers"]}
        self.client = SimpleNamespace(host=scope["client"][0])

    def __getitem__(self, key):
        return self.scope[key]

    def __iter__(self):
        return iter(self.scope)

    def __len__(self):
        return len(self.scope)


def test_none_stays_none():
    assert as_view(None) is None


def test_view_passes_through():
    view = EnvironView({})
    assert as_view(view) is view


def test_plain_mapping_is_raw():
    view = as_view({"REMOTE_ADDR": "192.0.2.1", "HTTP_USER_AGENT": "curl/8"})
    assert isinstance(view, EnvironView)
    assert view.framework == "raw"
    assert view.remote_ip() == "192.0.2.1"
    assert view.user_agent() == "curl/8"


def test_asgi_scope():
    scope = {"type": "http", "headers": [(b"user-agent", b"curl/8")], "client": ("192.0.2.1", 5000)}
    view = as_view(scope)
    assert isinstance(view, ScopeView)
    assert view.framework == "asgi"


def test_django_request_uses_meta():
    view = as_view(FakeDjangoRequest({"HTTP_USER_AGENT": "Django-UA", "REMOTE_ADDR": "192.0.2.8"}))
    assert isinstance(view, EnvironView)
    assert view.framework == "django"
    assert view.user_agent() == "Django-UA"


def test_flask_request_uses_environ():
    view = as_view(FakeFlaskRequest({"HTTP_USER_AGENT": "Flask-UA"}))
    assert view.framework == "flask"
    assert view.user_agent() == "Flask-UA"


def test_starlette_request():
    view = as_view(FakeStarletteRequest({"user-agent": "Starlette-UA"}, "192.0.2.9"))
    assert isinstance(view, HeadersView)
    assert view.framework == "starlette"
    assert view.user_agent() == "Starlette-UA"
    assert view.remote_ip() == "192.0.2.9"


def test_generic_headers_object():
    request = SimpleNamespace(headers={"User-Agent": "Generic"})
    view = as_view(request)
    assert view.framework == "unknown"
    assert view.user_agent() == "Generic"
    assert view.remote_ip() is None


def test_unknown_object_is_empty():
    view = as_view(object())
    assert view.framework == "unknown"
    assert view.user_agent() is None
    assert view.remote_ip() is None


def test_starlette_connection_mapping_is_starlette():
    scope = {
        "type": "http",
        "headers": [(b"user-agent", b"Starlette-UA")],
        "client": ("192.0.2.9", 5000),
    }
    view = as_view(FakeConnection(scope))
    assert isinstance(view, HeadersView)
    assert view.framework == "starlette"
    assert view.user_agent() == "Starlette-UA"
    assert view.remote_ip() == "192.0.2.9"


def test_starlette_websocket_keeps_client_details():
    scope = {
        "type": "websocket",
        "headers": [(b"user-agent", b"WS-UA"), (b"x-real-ip", b"198.51.100.5")],
        "client": ("10.0.0.2", 5000),
    }
    ctx = extract_context(FakeConnection(scope))
    assert ctx.framework == "starlette"
    assert ctx.user_agent == "WS-UA"
    assert ctx.ip_address == "198.51.100.5"


def test_websocket_scope():
    scope = {"type": "websocket", "headers": [(b"user-agent", b"WS-UA")], "client": ("192.0.2.3", 1)}
    view = as_view(scope)
    assert isinstance(view, ScopeView)
    assert view.user_agent() == "WS-UA"
    assert view.remote_ip() == "192.0.2.3"
