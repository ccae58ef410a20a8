"""Project management commands."""

import typer
from rich.prompt import Prompt

from projecthub.models import Role
from projecthub.services.api.client import get_client
from projecthub.services.project_service import get_project_service
from projecthub.utils.typer_helpers import SuggestingGroup
from projecthub.utils.ui.console import get_console
from projecthub.utils.ui.formatters import (
    format_error,
    format_output,
    format_project_detail,
    format_success,
)

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Project management commands")
console = get_console()


@app.command("list")
@command_wrapper
async def list_projects(
    page: int | None = typer.Option(None, "--page", help="Page number"),
    limit: int | None = typer.Option(None, "--limit", help="Projects per page"),
    sort: str | None = typer.Option(None, "--sort", help="name, createdAt or memberCount"),
    order: str | None = typer.Option(None, "--order", help="asc or desc"),
    search: str | None = typer.Option(None, "--search", "-s", help="Search term"),
    tags: str | None = typer.Option(None, "--tags", help="Comma-separated tag ids"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    compact: bool = typer.Option(False, "--compact", help="Compact output"),
) -> None:
    """List projects, a page at a time."""
    async with get_client() as client:
        result = await get_project_service(client).list_projects(
            page=page, limit=limit, sort=sort, order=order, search=search, tags=tags
        )
    format_output(result.model_dump(mode="json"), output, compact=compact)


@app.command("get")
@command_wrapper
async def get_project(
    project_id: str = typer.Argument(..., help="Project ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show a project with its members, tags and task count."""
    async with get_client() as client:
        detail = await get_project_service(client).load_project_detail(project_id)

    data = detail.model_dump(mode="json")
    if output == "pretty":
        format_project_detail(data)
    else:
        format_output(data, output)


@app.command("create")
@command_wrapper
async def create_project(
    name: str = typer.Option(..., "--name", "-n", help="Project name (3-100 characters)"),
    description: str | None = typer.Option(
        None, "--description", "-d", help="Description (10-500 characters)"
    ),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Create a new project."""
    if description is None:
        description = Prompt.ask("Description")

    async with get_client() as client:
        project = await get_project_service(client).create_project(name, description)
    format_success(f"Project created: {project.id}")
    format_output(project.model_dump(mode="json"), output)


@app.command("update")
@command_wrapper
async def update_project(
    project_id: str = typer.Argument(..., help="Project ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="Project name"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Update a project (OWNER only)."""
    if name is None and description is None:
        format_error("No updates specified")
        raise typer.Exit(2)

    async with get_client() as client:
        service = get_project_service(client)
        await service.load_for_edit(project_id)
        project = await service.update_project(project_id, name=name, description=description)
    format_success(f"Project updated: {project.id}")
    format_output(project.model_dump(mode="json"), output)


@app.command("delete")
@command_wrapper
async def delete_project(
    project_id: str = typer.Argument(..., help="Project ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a project permanently (OWNER only)."""
    if not yes and not typer.confirm(
        f"Are you sure you want to delete project {project_id}? This action cannot be undone."
    ):
        format_error("Cancelled")
        raise typer.Exit(0)

    async with get_client() as client:
        await get_project_service(client).delete_project(project_id)
    format_success(f"Project deleted: {project_id}")


@app.command("invite")
@command_wrapper
async def invite_user(
    project_id: str = typer.Argument(..., help="Project ID"),
    email: str = typer.Argument(..., help="Email of the user to invite"),
    role: Role = typer.Option(Role.VIEWER, "--role", "-r", help="Role to grant"),
) -> None:
    """Invite a user to a project (OWNER only)."""
    async with get_client() as client:
        result = await get_project_service(client).invite_user(project_id, email, role)
    format_success(result.message or f"Invited {result.member.email} as {result.member.role.value}")


@app.command("members")
@command_wrapper
async def list_members(
    project_id: str = typer.Argument(..., help="Project ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """List a project's members."""
    async with get_client() as client:
        members = await get_project_service(client).list_members(project_id)
    format_output([m.model_dump(mode="json") for m in members], output)
