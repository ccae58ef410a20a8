"""Dashboard command."""

import typer

from projecthub.services.api.client import get_client
from projecthub.services.project_service import get_project_service
from projecthub.services.token_manager import get_token_manager
from projecthub.utils.ui.console import get_console
from projecthub.utils.ui.formatters import format_output, format_projects_pretty

from .decorators import command_wrapper

console = get_console()


@command_wrapper
async def dashboard(
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show the logged-in user and their most recent projects."""
    user = get_token_manager().get_user()

    async with get_client() as client:
        board = await get_project_service(client).dashboard()

    if output != "pretty":
        data = board.model_dump(mode="json")
        data["user"] = user.model_dump(mode="json") if user else None
        format_output(data, output)
        return

    if user:
        console.print(f"[bold]Welcome back, {user.name}[/bold]  [dim]{user.email}[/dim]")
    console.print(
        f"[dim]{board.total_projects} projects · {board.owned_count} owned among the most recent[/dim]"
    )
    console.print()
    if board.recent_projects:
        format_projects_pretty([p.model_dump(mode="json") for p in board.recent_projects])
    else:
        console.print("[yellow]No projects yet. Create one with 'projecthub projects create'.[/yellow]")
