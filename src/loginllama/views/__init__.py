"""Request adapters consumed by the IP resolver and context extractor."""

from loginllama.views.adapt import as_view
from loginllama.views.base import Framework, RequestView
from loginllama.views.environ import EnvironView, ambient_view, environ_key
from loginllama.views.headers import HeadersView, ScopeView

__all__ = [
    "EnvironView",
    "Framework",
    "HeadersView",
    "RequestView",
    "ScopeView",
    "ambient_view",
    "as_view",
    "environ_key",
]
