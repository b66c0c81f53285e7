"""loginllama — async client for the LoginLlama login-risk API.

Pass an identity key; IP address and User-Agent are picked up from the
request you hand over, from middleware-recorded context, or from CGI
variables.  Replies come back as :class:`CheckResult`.
"""

from loginllama.client import LoginLlama
from loginllama.context import (
    ContextStore,
    RequestContext,
    clear_context,
    extract_context,
    get_context,
    set_context,
)
from loginllama.exceptions import LoginLlamaError, TransportError, ValidationError
from loginllama.ip import resolve_ip
from loginllama.middleware import ContextMiddleware, WSGIContextMiddleware
from loginllama.normalize import normalize_response
from loginllama.result import AuthenticationOutcome, CheckResult, LoginCheckStatus
from loginllama.schema import CheckOptions
from loginllama.transport import LOGINLLAMA_API_ENDPOINT, HttpxTransport, Transport

__all__ = [
    "LOGINLLAMA_API_ENDPOINT",
    "AuthenticationOutcome",
    "CheckOptions",
    "CheckResult",
    "ContextMiddleware",
    "ContextStore",
    "HttpxTransport",
    "LoginCheckStatus",
    "LoginLlama",
    "LoginLlamaError",
    "RequestContext",
    "Transport",
    "TransportError",
    "ValidationError",
    "WSGIContextMiddleware",
    "clear_context",
    "extract_context",
    "get_context",
    "normalize_response",
    "resolve_ip",
    "set_context",
]
