"""Run the proxy server."""

import typer
import uvicorn

from projecthub.proxy import create_app
from projecthub.services.config_service import get_config_service
from projecthub.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


@command_wrapper(auth_required=False)
def serve(
    host: str | None = typer.Option(None, "--host", help="Interface to bind"),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on"),
    backend_url: str | None = typer.Option(
        None, "--backend-url", help="Backend origin (overrides BACKEND_URL)"
    ),
    log_level: str = typer.Option("info", "--log-level", help="uvicorn log level"),
) -> None:
    """Start the proxy that forwards /api requests to the backend."""
    config_service = get_config_service()
    proxy_config = config_service.config.proxy
    host = host or proxy_config.host
    port = port or proxy_config.port
    backend_url = backend_url or config_service.backend_url

    console.print(
        f"[bold]ProjectHub proxy[/bold] on [cyan]http://{host}:{port}[/cyan] "
        f"→ [cyan]{backend_url}[/cyan]"
    )
    uvicorn.run(create_app(backend_url), host=host, port=port, log_level=log_level)
