"""Generic request forwarding.

Every proxy route is one :class:`Route` handled by :func:`forward`, which
applies a fixed status policy:

======================================  ===========================================
upstream outcome                        proxy response
======================================  ===========================================
body is not JSON                        502 ``Invalid response from server``
connect error, timeout, protocol error  503 ``Unable to connect to backend service``
non-success status with JSON body       same status, same body
success                                 same status, same body (204 -> no body)
anything else                           500 ``Internal server error``
======================================  ===========================================

One attempt per call: no retries, no backoff.
"""

from __future__ import annotations

import json
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote

import httpx
from fastapi import Request
from fastapi.responses import JSONResponse, Response

from projecthub.utils.logger import get_logger

logger = get_logger("proxy")

INVALID_RESPONSE_MESSAGE = "Invalid response from server"
UNREACHABLE_MESSAGE = "Unable to connect to backend service"
INTERNAL_ERROR_MESSAGE = "Internal server error"
TOKEN_REQUIRED_MESSAGE = "Authorization token required"

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(frozen=True)
class Route:
    """One proxied resource-action pair.

    Attributes:
        method: HTTP method, matched inbound and used outbound
        path: Proxy path template, e.g. ``/api/tags/{id}``
        upstream: Backend path template using the same placeholders
        name: Route name (used in logs)
        forward_headers: Inbound headers copied to the outbound request
        require_auth: Answer 401 without calling upstream when no token is sent
        empty_on_success: Answer any 2xx with 204 and no body
        transform: Reshape a successful JSON payload before relaying it
    """

    method: str
    path: str
    upstream: str
    name: str
    forward_headers: tuple[str, ...] = ("authorization",)
    require_auth: bool = False
    empty_on_success: bool = False
    transform: Callable[[Any], Any] | None = field(default=None, compare=False)

    def upstream_url(self, path_params: dict[str, str], query: str = "") -> str:
        quoted = {key: quote(str(value), safe="") for key, value in path_params.items()}
        url = self.upstream.format(**quoted)
        return f"{url}?{query}" if query else url


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"message": message}, status_code=status_code)


async def _read_body(request: Request) -> bytes | None:
    """Re-serialize the inbound JSON body; an empty body forwards nothing."""
    if request.method not in BODY_METHODS:
        return None
    raw = await request.body()
    if not raw.strip():
        return None
    return json.dumps(json.loads(raw)).encode("utf-8")


async def forward(request: Request, route: Route, client: httpx.AsyncClient) -> Response:
    """Forward *request* to the backend described by *route* and relay the answer."""
    try:
        headers = {"Content-Type": "application/json"}
        for name in route.forward_headers:
            value = request.headers.get(name)
            if value:
                headers[name.title()] = value

        if route.require_auth and "Authorization" not in headers:
            return _message(401, TOKEN_REQUIRED_MESSAGE)

        body = await _read_body(request)

        url = route.upstream_url(request.path_params, request.url.query)
        start = time.monotonic()
        try:
            upstream = await client.request(route.method, url, content=body, headers=headers)
        except httpx.TransportError as e:
            logger.warning("%s: %s %s unreachable: %r", route.name, route.method, url, e)
            return _message(503, UNREACHABLE_MESSAGE)

        logger.info(
            "%s: %s %s -> %s (%.3fs)",
            route.name,
            route.method,
            url,
            upstream.status_code,
            time.monotonic() - start,
        )

        if upstream.is_success and (route.empty_on_success or upstream.status_code == 204):
            return Response(status_code=204)

        try:
            data = upstream.json()
        except ValueError:
            logger.error("%s: upstream returned invalid JSON (status %s)", route.name, upstream.status_code)
            return _message(502, INVALID_RESPONSE_MESSAGE)

        if not upstream.is_success:
            return JSONResponse(data, status_code=upstream.status_code)

        if route.transform is not None:
            data = route.transform(data)
        return JSONResponse(data, status_code=upstream.status_code)

    except Exception:
        logger.exception("%s: proxy error", route.name)
        return _message(500, INTERNAL_ERROR_MESSAGE)
