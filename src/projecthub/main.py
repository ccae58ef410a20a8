"""Main entry point for the ProjectHub CLI."""

import asyncio

import httpx
import typer

from projecthub import __version__
from projecthub.commands import ai, auth, config, projects, tags, tasks
from projecthub.commands.dashboard import dashboard
from projecthub.commands.serve import serve
from projecthub.services.config_service import get_config_service
from projecthub.utils.typer_helpers import SuggestingGroup
from projecthub.utils.ui.console import get_console

app = typer.Typer(
    name="projecthub",
    cls=SuggestingGroup,
    help="Command-line client and proxy server for ProjectHub project management",
    no_args_is_help=True,
)

console = get_console()


app.add_typer(auth.app, name="auth", help="Authentication commands")
app.add_typer(projects.app, name="projects", help="Project management commands")
app.add_typer(tags.app, name="tags", help="Tag management commands")
app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(ai.app, name="ai", help="AI assistant commands")
app.add_typer(config.app, name="config", help="Configuration management")

app.command("dashboard")(dashboard)
app.command("serve")(serve)


async def _check_health(endpoint: str) -> None:
    async with httpx.AsyncClient(base_url=endpoint, timeout=5) as client:
        try:
            response = await client.get("/health")
        except httpx.HTTPError as e:
            console.print(f"[red]✗ Proxy health check failed: {e}[/red]")
            return
    if response.status_code == 200:
        console.print(f"[green]✓ Proxy at {endpoint} is healthy[/green]")
    else:
        console.print(f"[yellow]⚠ Proxy returned status {response.status_code}[/yellow]")


@app.command()
def version(
    check: bool = typer.Option(False, "--check", help="Also check the proxy's health"),
) -> None:
    """Show version information."""
    console.print(f"[bold]ProjectHub CLI[/bold] version [cyan]{__version__}[/cyan]")
    if check:
        asyncio.run(_check_health(get_config_service().api_endpoint))


if __name__ == "__main__":
    app()
