"""Shared test fixtures."""

import os
from unittest.mock import AsyncMock

import pytest

from loginllama import ContextStore, LoginLlama
from loginllama.context import default_store
from loginllama.transport import Transport
from loginllama.views import EnvironView


@pytest.fixture(autouse=True)
def clean_cgi_environ(monkeypatch):
    """Keep the ambient (os.environ) view empty unless a test sets it."""
    for key in list(os.environ):
        if key == "REMOTE_ADDR" or key.startswith("HTTP_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def clean_default_store():
    default_store.clear()
    yield
    default_store.clear()


@pytest.fixture
def api_reply():
    return {
        "data": {
            "attributes": {
                "status": "pass",
                "message": "Valid login",
                "risk_score": 1,
                "risk_codes": ["login_valid"],
            }
        },
        "meta": {"environment": "production"},
    }


@pytest.fixture
def transport(api_reply):
    mock = AsyncMock(spec=Transport)
    mock.post.return_value = api_reply
    return mock


@pytest.fixture
def store():
    return ContextStore(ambient=lambda: EnvironView({}))


@pytest.fixture
def client(transport, store):
    return LoginLlama("test_key", transport=transport, context_store=store, ambient=lambda: None)


@pytest.fixture
def environ():
    return {
        "REMOTE_ADDR": "10.0.0.2",
        "HTTP_X_FORWARDED_FOR": "10.0.0.5, 203.0.113.9",
        "HTTP_USER_AGENT": "Mozilla/5.0",
    }

