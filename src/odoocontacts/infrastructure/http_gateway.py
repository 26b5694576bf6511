"""Shared HTTP plumbing for the gateways: one httpx.AsyncClient, JSON in and out."""

import logging

import httpx

from odoocontacts.application.errors import TransportError
from odoocontacts.infrastructure.settings import OdooSettings

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class HttpGateway:
    """Owns an AsyncClient rooted at the settings' base URL.

    Pass `client` to reuse one (tests pass a client built on httpx.MockTransport).
    The client keeps cookies, so a session opened by authenticate is sent with
    the call that follows it.
    """

    def __init__(self, settings: OdooSettings, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.timeout,
            headers=JSON_HEADERS,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        """Send the request and return the decoded JSON object.

        Error envelopes come back as data (whatever the status code); only a
        failed request or a body that is not a JSON object raises TransportError.
        """
        try:
            response = await self._client.request(
                method, path, json=payload, headers=JSON_HEADERS
            )
        except httpx.HTTPError as e:
            logger.error("%s %s failed: %s", method, path, e)
            raise TransportError(f"Network error: {e}") from e
        try:
            body = response.json()
        except ValueError as e:
            raise TransportError(
                f"Malformed response from {path} (HTTP {response.status_code})"
            ) from e
        if not isinstance(body, dict):
            raise TransportError(f"Malformed response from {path}: expected a JSON object")
        logger.debug("%s %s -> %s", method, path, response.status_code)
        return body

    async def _post(self, path: str, payload: dict) -> dict:
        return await self._request("POST", path, payload)

    async def _get(self, path: str) -> dict:
        return await self._request("GET", path)
