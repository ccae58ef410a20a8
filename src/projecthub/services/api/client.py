"""API client for the ProjectHub proxy."""

from __future__ import annotations

import json
from typing import Any

import httpx

from projecthub.services.api.errors import APIConnectionError, APIError
from projecthub.services.config_service import get_config_service
from projecthub.services.token_manager import Session, get_token_manager
from projecthub.utils.logger import get_logger

logger = get_logger("api")


class APIClient:
    """HTTP client for the same-origin ``/api`` routes.

    Every request carries the session's bearer token when there is one.
    Decoding follows the proxy's contract: 204 and non-JSON bodies read as
    ``None``, non-success statuses raise :class:`APIError`.
    """

    def __init__(
        self,
        session: Session | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        config_service = get_config_service()
        self.session = session if session is not None else get_token_manager().session()
        self.base_url = (base_url or config_service.api_endpoint).rstrip("/")
        self.timeout = timeout if timeout is not None else config_service.config.api.timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> APIClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _get_headers(self, skip_auth: bool = False) -> dict[str, str]:
        """Get HTTP headers with authentication."""
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        if not skip_auth and self.session.authorization:
            headers["Authorization"] = self.session.authorization
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        skip_auth: bool = False,
    ) -> Any:
        """Make one request and return the decoded JSON body (or None)."""
        client = await self._get_client()
        url = path if path.startswith("/") else f"/{path}"

        try:
            response = await client.request(
                method=method,
                url=url,
                json=json,
                params=params,
                headers=self._get_headers(skip_auth=skip_auth),
            )
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise APIConnectionError([f"Unable to connect to {self.base_url}"]) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        data = _decode_body(response)

        if not response.is_success:
            raise APIError.from_payload(response.status_code, data)
        return data

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, *, json: Any = None, skip_auth: bool = False) -> Any:
        return await self.request("POST", path, json=json, skip_auth=skip_auth)

    async def patch(self, path: str, *, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)


def _decode_body(response: httpx.Response) -> Any:
    content_type = response.headers.get("content-type", "")
    if response.status_code == 204 or "application/json" not in content_type:
        return None
    text = response.text
    if not text:
        return None
    try:
        return json.loads(text)
    except ValueError as e:
        raise APIError(response.status_code, details=["Invalid response from server"]) from e


def get_client(session: Session | None = None) -> APIClient:
    """Get an API client instance."""
    return APIClient(session)
