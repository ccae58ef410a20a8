"""AI assistant commands."""

import typer

from projecthub.services.ai_service import get_ai_service
from projecthub.services.api.client import get_client
from projecthub.utils.typer_helpers import SuggestingGroup
from projecthub.utils.ui.formatters import (
    format_analysis,
    format_output,
    format_success,
    format_suggestions,
    format_summary,
    format_warning,
)

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="AI assistant commands")


@app.command("suggest-tags")
@command_wrapper
async def suggest_tags(
    content: str = typer.Argument(..., help="Text to suggest tags for"),
    project_id: str | None = typer.Option(None, "--project", "-p", help="Project context"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Suggest tags for a piece of text."""
    async with get_client() as client:
        result = await get_ai_service(client).suggest_tags(content, project_id)
    data = result.model_dump(mode="json")
    if output == "pretty":
        format_suggestions(data)
    else:
        format_output(data, output)


@app.command("analyze")
@command_wrapper
async def analyze_project(
    project_id: str = typer.Argument(..., help="Project ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Analyze a project's health, risks and bottlenecks."""
    async with get_client() as client:
        result = await get_ai_service(client).analyze_project(project_id)
    data = result.model_dump(mode="json")
    if output == "pretty":
        format_analysis(data)
    else:
        format_output(data, output)


@app.command("summary")
@command_wrapper
async def project_summary(
    project_id: str = typer.Argument(..., help="Project ID"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Summarize a project."""
    async with get_client() as client:
        result = await get_ai_service(client).project_summary(project_id)
    data = result.model_dump(mode="json")
    if output == "pretty":
        format_summary(data)
    else:
        format_output(data, output)


@app.command("add-tag")
@command_wrapper
async def add_suggested_tag(
    project_id: str = typer.Argument(..., help="Project ID"),
    name: str = typer.Argument(..., help="Suggested tag name"),
) -> None:
    """Create a suggested tag and add it to a project."""
    async with get_client() as client:
        tag, refreshed = await get_ai_service(client).add_suggested_tag(project_id, name)
    format_success(f'Tag "{tag.name}" has been added to your project!')
    if refreshed is None:
        format_warning("Could not refresh the project's tags")
