"""Tag management commands."""

import typer

from projecthub.services.api.client import get_client
from projecthub.services.tag_service import DEFAULT_TAG_COLOR, get_tag_service
from projecthub.utils.typer_helpers import SuggestingGroup
from projecthub.utils.ui.formatters import format_error, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Tag management commands")


@app.command("list")
@command_wrapper
async def list_tags(
    project_id: str | None = typer.Option(
        None, "--project", "-p", help="Only tags attached to this project"
    ),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """List all tags, or a project's tags."""
    async with get_client() as client:
        service = get_tag_service(client)
        tags = await (service.project_tags(project_id) if project_id else service.list_tags())
    format_output([t.model_dump(mode="json") for t in tags], output)


@app.command("get")
@command_wrapper
async def get_tag(
    tag_id: str = typer.Argument(..., help="Tag ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show a tag."""
    async with get_client() as client:
        tag = await get_tag_service(client).get_tag(tag_id)
    format_output(tag.model_dump(mode="json"), output)


@app.command("create")
@command_wrapper
async def create_tag(
    name: str = typer.Argument(..., help="Tag name"),
    color: str = typer.Option(DEFAULT_TAG_COLOR, "--color", "-c", help="Hex color"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    project_id: str | None = typer.Option(
        None, "--project", "-p", help="Also attach the new tag to this project"
    ),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Create a tag."""
    async with get_client() as client:
        service = get_tag_service(client)
        tag = await service.create_tag(name, color=color, description=description)
        if project_id:
            await service.add_tags(project_id, [tag.id])
    format_success(f"Tag created: {tag.id}")
    if project_id:
        format_success(f"Tag added to project {project_id}")
    format_output(tag.model_dump(mode="json"), output)


@app.command("update")
@command_wrapper
async def update_tag(
    tag_id: str = typer.Argument(..., help="Tag ID"),
    name: str | None = typer.Option(None, "--name", "-n", help="Tag name"),
    color: str | None = typer.Option(None, "--color", "-c", help="Hex color"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Update a tag (creator only)."""
    if name is None and color is None and description is None:
        format_error("No updates specified")
        raise typer.Exit(2)

    async with get_client() as client:
        tag = await get_tag_service(client).update_tag(
            tag_id, name=name, color=color, description=description
        )
    format_success(f"Tag updated: {tag.id}")
    format_output(tag.model_dump(mode="json"), output)


@app.command("delete")
@command_wrapper
async def delete_tag(
    tag_id: str = typer.Argument(..., help="Tag ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a tag (creator only)."""
    if not yes and not typer.confirm(f"Are you sure you want to delete tag {tag_id}?"):
        format_error("Cancelled")
        raise typer.Exit(0)

    async with get_client() as client:
        await get_tag_service(client).delete_tag(tag_id)
    format_success(f"Tag deleted: {tag_id}")


@app.command("add")
@command_wrapper
async def add_tags(
    project_id: str = typer.Argument(..., help="Project ID"),
    tag_ids: list[str] = typer.Argument(..., help="Tag IDs to attach"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Attach existing tags to a project (OWNER, CONTRIBUTOR)."""
    async with get_client() as client:
        tags = await get_tag_service(client).add_tags(project_id, tag_ids)
    format_success(f"Added {len(tag_ids)} tag(s) to project {project_id}")
    format_output([t.model_dump(mode="json") for t in tags], output)


@app.command("remove")
@command_wrapper
async def remove_tag(
    project_id: str = typer.Argument(..., help="Project ID"),
    tag_id: str = typer.Argument(..., help="Tag ID"),
) -> None:
    """Detach a tag from a project (OWNER, CONTRIBUTOR)."""
    async with get_client() as client:
        remaining = await get_tag_service(client).remove_tag(project_id, tag_id)
    format_success(f"Tag removed; {len(remaining)} tag(s) remain on project {project_id}")


@app.command("available")
@command_wrapper
async def available_tags(
    project_id: str = typer.Argument(..., help="Project ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """List tags that are not attached to a project yet."""
    async with get_client() as client:
        tags = await get_tag_service(client).available_tags(project_id)
    format_output([t.model_dump(mode="json") for t in tags], output)
