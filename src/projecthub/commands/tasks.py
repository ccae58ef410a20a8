"""Task management commands."""

import typer

from projecthub.models import TaskStatus
from projecthub.services.api.client import get_client
from projecthub.services.task_service import get_task_service, group_by_status
from projecthub.utils.typer_helpers import SuggestingGroup
from projecthub.utils.ui.formatters import (
    format_error,
    format_info,
    format_output,
    format_success,
    format_task_board,
)

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task management commands")


@app.command("list")
@command_wrapper
async def list_tasks(
    project_id: str = typer.Argument(..., help="Project ID"),
    status: TaskStatus | None = typer.Option(None, "--status", help="Only tasks in this status"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
    compact: bool = typer.Option(False, "--compact", help="Compact output"),
) -> None:
    """List a project's tasks, grouped by status."""
    async with get_client() as client:
        tasks = await get_task_service(client).list_tasks(project_id, status=status)

    if output != "pretty":
        format_output([t.model_dump(mode="json") for t in tasks], output)
        return
    if not tasks:
        format_info("No tasks yet")
        return
    board = {
        column.value: [t.model_dump(mode="json") for t in column_tasks]
        for column, column_tasks in group_by_status(tasks).items()
    }
    format_task_board(board, compact=compact)


@app.command("create")
@command_wrapper
async def create_task(
    project_id: str = typer.Argument(..., help="Project ID"),
    title: str = typer.Argument(..., help="Task title"),
    description: str = typer.Option("", "--description", "-d", help="Description"),
    status: TaskStatus | None = typer.Option(None, "--status", help="Initial status"),
    assignee: str | None = typer.Option(None, "--assignee", "-a", help="Assignee user ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Create a task in a project."""
    async with get_client() as client:
        task = await get_task_service(client).create_task(
            project_id,
            title,
            description=description,
            status=status,
            assigned_to_id=assignee,
        )
    format_success(f"Task created: {task.id}")
    format_output(task.model_dump(mode="json"), output)


@app.command("update")
@command_wrapper
async def update_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    title: str | None = typer.Option(None, "--title", "-t", help="Task title"),
    description: str | None = typer.Option(None, "--description", "-d", help="Description"),
    status: TaskStatus | None = typer.Option(None, "--status", help="Status"),
    assignee: str | None = typer.Option(None, "--assignee", "-a", help="Assignee user ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Update a task."""
    if all(value is None for value in (title, description, status, assignee)):
        format_error("No updates specified")
        raise typer.Exit(2)

    async with get_client() as client:
        task = await get_task_service(client).update_task(
            task_id,
            title=title,
            description=description,
            status=status,
            assigned_to_id=assignee,
        )
    format_success(f"Task updated: {task.id}")
    format_output(task.model_dump(mode="json"), output)


@app.command("status")
@command_wrapper
async def set_status(
    task_id: str = typer.Argument(..., help="Task ID"),
    status: TaskStatus = typer.Argument(..., help="TODO, DOING or DONE"),
) -> None:
    """Move a task to another status."""
    async with get_client() as client:
        task = await get_task_service(client).set_status(task_id, status)
    format_success(f"Task {task.id} is now {task.status.value}")


@app.command("delete")
@command_wrapper
async def delete_task(
    task_id: str = typer.Argument(..., help="Task ID"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Delete a task."""
    if not yes and not typer.confirm(f"Are you sure you want to delete task {task_id}?"):
        format_error("Cancelled")
        raise typer.Exit(0)

    async with get_client() as client:
        await get_task_service(client).delete_task(task_id)
    format_success(f"Task deleted: {task_id}")
