"""FastAPI application serving the proxy routes."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from projecthub import __version__
from projecthub.proxy.routes import build_router
from projecthub.utils.logger import get_logger

logger = get_logger("proxy")


def create_app(
    backend_url: str | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the proxy app.

    Args:
        backend_url: Backend origin; defaults to ``BACKEND_URL`` or the config file
        transport: Optional httpx transport for the upstream client (tests)
    """
    if backend_url is None:
        from projecthub.services.config_service import get_config_service

        backend_url = get_config_service().backend_url
    backend_url = backend_url.rstrip("/")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with httpx.AsyncClient(base_url=backend_url, transport=transport) as client:
            app.state.upstream = client
            logger.info("proxy started, forwarding to %s", backend_url)
            yield
        logger.info("proxy stopped")

    app = FastAPI(title="ProjectHub proxy", version=__version__, lifespan=lifespan)
    app.state.backend_url = backend_url
    app.include_router(build_router())

    @app.get("/health", tags=["utils"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "backend": app.state.backend_url}

    return app
