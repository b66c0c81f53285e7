"""Transports that carry requests to the LoginLlama API."""

from loginllama.transport.base import Transport
from loginllama.transport.http import LOGINLLAMA_API_ENDPOINT, HttpxTransport

__all__ = ["LOGINLLAMA_API_ENDPOINT", "HttpxTransport", "Transport"]
