"""HttpxTransport — the default transport, built on ``httpx.AsyncClient``."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from loginllama.exceptions import TransportError
from loginllama.transport.base import Transport

logger = logging.getLogger(__name__)

LOGINLLAMA_API_ENDPOINT = "https://loginllama.app/api/v1"
SDK_SOURCE = "python-sdk"
SDK_VERSION = "1"


class HttpxTransport(Transport):
    """Sends requests to the LoginLlama API with ``httpx``.

    A fresh ``httpx.AsyncClient`` is opened for every call and closed before
    the call returns.

    Parameters:
        api_key: Sent as ``X-API-KEY``.
        base_url: API root.  Defaults to :data:`LOGINLLAMA_API_ENDPOINT`.
        headers: Extra default headers, merged over the SDK defaults.
        timeout: Request timeout in seconds.  Defaults to 30.
        http_transport: Optional ``httpx`` transport, e.g.
            ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = LOGINLLAMA_API_ENDPOINT,
        headers: Mapping[str, str] | None = None,
        timeout: float = 30.0,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "X-LOGINLLAMA-SOURCE": SDK_SOURCE,
            "X-LOGINLLAMA-VERSION": SDK_VERSION,
            "Content-Type": "application/json",
            "X-API-KEY": api_key,
            **(headers or {}),
        }
        self._timeout = timeout
        self._http_transport = http_transport

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    async def get(self, path: str) -> Any:
        return await self._request("GET", path)

    async def post(self, path: str, body: dict[str, Any]) -> Any:
        return await self._request("POST", path, json=body)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, url)
        try:
            async with httpx.AsyncClient(transport=self._http_transport) as client:
                response = await client.request(
                    method,
                    url,
                    headers=self._headers,
                    timeout=self._timeout,
                    **kwargs,
                )
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {url} timed out after {self._timeout} seconds") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Could not connect to LoginLlama API: {e}") from e

        if response.status_code >= 400:
            raise TransportError(
                f"HTTP Error: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError:
            logger.debug("Response from %s is not valid JSON", url)
            return None
