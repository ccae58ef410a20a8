"""Output formatters for different formats."""

import json
from datetime import UTC, datetime
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table
from rich.text import Text

from projecthub.models import Role

console = Console()

ROLE_STYLES = {
    "OWNER": "bold magenta",
    "CONTRIBUTOR": "cyan",
    "VIEWER": "dim",
}

STATUS_ICONS = {
    "TODO": "○",
    "DOING": "◐",
    "DONE": "●",
}

STATUS_STYLES = {
    "TODO": "white",
    "DOING": "yellow",
    "DONE": "green",
}


def format_output(data: Any, output_format: str = "pretty", compact: bool = False) -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format in ("table", "wide"):
        format_table(data)
    elif output_format == "quiet":
        format_quiet(data)
    else:
        format_pretty(data, compact=compact)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        # Paginated envelope
        if "data" in data and "meta" in data:
            format_dict_table(data["data"])
        else:
            format_single_item(data)
    else:
        console.print(data)


def _cell(value: Any) -> str:
    if isinstance(value, bool):
        return "✓" if value else "✗"
    if isinstance(value, list):
        return ", ".join(v.get("name", str(v)) if isinstance(v, dict) else str(v) for v in value)
    if isinstance(value, dict):
        return str(value.get("name") or value.get("id") or value)
    if value is None:
        return "-"
    return str(value)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())
    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        table.add_row(*(_cell(item.get(col)) for col in columns))

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        table.add_row(key.replace("_", " ").title(), _cell(value))

    console.print(table)


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


# ============================================================================
# Pretty Format Implementation
# ============================================================================


def format_pretty(data: Any, compact: bool = False) -> None:
    """Format data in pretty format, detecting the record type."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        first_item = data[0]
        if not isinstance(first_item, dict):
            for item in data:
                console.print(item)
        elif "title" in first_item and "status" in first_item:
            format_tasks_pretty(data, compact)
        elif "user_role" in first_item or "member_count" in first_item:
            format_projects_pretty(data, compact)
        elif "role" in first_item and "email" in first_item:
            format_members_pretty(data)
        elif "color" in first_item:
            format_tags_pretty(data)
        else:
            format_generic_list_pretty(data)
    elif isinstance(data, dict):
        if "data" in data and "meta" in data:
            format_pretty(data["data"], compact)
            format_pagination(data["meta"])
        else:
            format_single_item_pretty(data)
    else:
        console.print(data)


def format_projects_pretty(projects: list[dict], compact: bool = False) -> None:
    """Format projects in pretty format."""
    owned = [p for p in projects if p.get("user_role") == "OWNER"]

    header = Text()
    header.append("📁 Projects ", style="bold cyan")
    header.append(f"({len(projects)} shown, {len(owned)} owned)", style="dim")
    console.print(header)
    console.print()

    for project in projects:
        format_project_item(project, compact, indent="  ")


def format_project_item(project: dict, compact: bool = False, indent: str = "") -> None:
    """Format a single project item."""
    role = project.get("user_role") or "VIEWER"

    line = Text()
    line.append(f"{indent}📁 ", style="")
    line.append(project.get("name", "Untitled"), style="bold")
    line.append(f"  {role}", style=ROLE_STYLES.get(role, ""))
    if not compact:
        line.append(f"  {project.get('id', '')}", style="dim")
    console.print(line)

    if compact:
        return

    if project.get("description"):
        console.print(Text(f"{indent}   {project['description']}", style="italic"))

    meta: list[tuple[str, str]] = []
    members = project.get("member_count")
    if members is not None:
        meta.append((f"👥 {members} member{'s' if members != 1 else ''}", "blue"))
    tags = project.get("tags") or []
    if tags:
        meta.append(("🏷  " + ", ".join(t.get("name", "") for t in tags), "cyan"))
    if project.get("updated_at"):
        meta.append((f"Last updated: {format_relative_time(project['updated_at'])}", "dim"))

    for text, style in meta:
        meta_line = Text()
        meta_line.append(f"{indent}   └─ ", style="dim")
        meta_line.append(text, style=style)
        console.print(meta_line)


def format_project_detail(detail: dict) -> None:
    """Format the project detail view (project, members, tags, task count)."""
    project = detail["project"]
    format_project_item(project, compact=False)
    console.print()

    console.print(f"[bold]Tasks:[/bold] {detail.get('task_count', 0)}")
    console.print()

    console.print("[bold]Tags[/bold]")
    tags = detail.get("tags") or []
    if tags:
        format_tags_pretty(tags, indent="  ")
    else:
        console.print("  [dim]No tags[/dim]")
    console.print()

    console.print("[bold]Members[/bold]")
    members = detail.get("members") or []
    if members:
        format_members_pretty(members, indent="  ")
    else:
        console.print("  [dim]No members[/dim]")

    actions = project_actions(project.get("id", ""), project.get("user_role"))
    if actions:
        console.print()
        console.print("[bold]Actions[/bold]")
        for action in actions:
            console.print(f"  [dim]projecthub[/dim] {action}")


def project_actions(project_id: str, role: str | None) -> list[str]:
    """Commands the current role is offered on a project page."""
    actions = []
    if Role.can_write(role):
        actions += [
            f"tags add {project_id} <tag-id>",
            f"tasks create {project_id} <title>",
            f"ai add-tag {project_id} <name>",
        ]
    if Role.is_owner(role):
        actions += [
            f"projects update {project_id}",
            f"projects invite {project_id} <email>",
            f"projects delete {project_id}",
        ]
    return actions


def format_members_pretty(members: list[dict], indent: str = "") -> None:
    for member in members:
        role = member.get("role", "")
        line = Text()
        line.append(f"{indent}• {member.get('name', '')} ", style="bold")
        line.append(f"<{member.get('email', '')}> ", style="")
        line.append(role, style=ROLE_STYLES.get(role, ""))
        if member.get("joined_at"):
            line.append(f"  joined {format_date(member['joined_at'])}", style="dim")
        console.print(line)


def format_tags_pretty(tags: list[dict], indent: str = "") -> None:
    for tag in tags:
        color = tag.get("color") or "#808080"
        line = Text()
        line.append(f"{indent}● ", style=color)
        line.append(tag.get("name", ""), style="bold")
        line.append(f"  {tag.get('id', '')}", style="dim")
        if tag.get("description"):
            line.append(f"  {tag['description']}", style="italic")
        console.print(line)


def format_tasks_pretty(tasks: list[dict], compact: bool = False) -> None:
    """Format tasks grouped by status."""
    groups = {status: [t for t in tasks if t.get("status") == status] for status in STATUS_ICONS}
    format_task_board(groups, compact)


def format_task_board(groups: dict[str, list[dict]], compact: bool = False) -> None:
    """Print one section per status column; empty columns are skipped."""
    for status in ("TODO", "DOING", "DONE"):
        group = groups.get(status) or []
        if not group:
            continue
        console.print(f"{status} ({len(group)})", style=f"bold {STATUS_STYLES[status]}")
        for task in group:
            format_task_item(task, compact, indent="  ")
        console.print()


def format_task_item(task: dict, compact: bool = False, indent: str = "") -> None:
    status = task.get("status", "TODO")
    line = Text()
    line.append(f"{indent}{STATUS_ICONS.get(status, '○')} ", style=STATUS_STYLES.get(status, ""))
    line.append(task.get("title", ""), style="bold")
    line.append(f"  {task.get('id', '')}", style="dim")
    console.print(line)
    if compact:
        return
    assignee = task.get("assigned_to")
    if assignee:
        console.print(Text(f"{indent}   └─ 👤 {assignee.get('name', '')}", style="blue"))
    if task.get("description"):
        console.print(Text(f"{indent}   {task['description']}", style="italic dim"))


def format_pagination(meta: dict) -> None:
    text = Text()
    text.append(
        f"Page {meta.get('current_page', 1)} of {meta.get('total_pages', 1)}"
        f" · {meta.get('total_items', 0)} total",
        style="dim",
    )
    if meta.get("has_previous_page"):
        text.append("  ‹ prev", style="dim")
    if meta.get("has_next_page"):
        text.append("  next ›", style="dim")
    console.print(text)


def format_analysis(analysis: dict) -> None:
    """Format an AI project analysis."""
    score = float(analysis.get("health_score", 0))
    console.print(
        f"[bold]Health score:[/bold] {get_progress_bar(score)} "
        f"[{get_health_color(score)}]{score:g}/100[/{get_health_color(score)}]"
    )
    if analysis.get("predicted_completion_date"):
        console.print(
            f"[bold]Predicted completion:[/bold] {format_date(analysis['predicted_completion_date'])}"
        )
    for title, key, style in (
        ("Risk factors", "risk_factors", "red"),
        ("Bottlenecks", "bottlenecks", "yellow"),
        ("Recommendations", "recommendations", "green"),
    ):
        items = analysis.get(key) or []
        if items:
            console.print()
            console.print(f"[bold {style}]{title}[/bold {style}]")
            for item in items:
                console.print(f"  • {item}")


def format_summary(summary: dict) -> None:
    console.print(summary.get("summary", ""))
    insights = summary.get("key_insights") or []
    if insights:
        console.print()
        console.print("[bold]Key insights[/bold]")
        for insight in insights:
            console.print(f"  • {insight}")


def format_suggestions(suggestions: dict) -> None:
    items = suggestions.get("suggestions") or []
    if not items:
        console.print("[yellow]No suggestions[/yellow]")
        return
    confidence = float(suggestions.get("confidence", 0))
    console.print(f"[bold]Suggested tags[/bold] [dim](confidence {confidence:.0%})[/dim]")
    for name in items:
        console.print(f"  🏷  {name}")


def format_generic_list_pretty(items: list[dict]) -> None:
    """Format generic list of items."""
    for item in items:
        if "name" in item:
            console.print(f"• {item['name']}", style="bold")
        elif "title" in item:
            console.print(f"• {item['title']}")
        else:
            console.print(f"• {item.get('id', 'Item')}")


def format_single_item_pretty(item: dict) -> None:
    """Format a single item in pretty format."""
    if "title" in item and "status" in item:
        format_task_item(item, compact=False)
    elif "user_role" in item:
        format_project_item(item, compact=False)
    elif "color" in item and "name" in item:
        format_tags_pretty([item])
    else:
        for key, value in item.items():
            formatted_key = key.replace("_", " ").title()
            console.print(f"[cyan]{formatted_key}:[/cyan] {_cell(value)}")


def format_quiet(data: Any) -> None:
    """Format output in quiet mode (IDs only)."""
    if isinstance(data, list):
        for item in data:
            if isinstance(item, dict) and "id" in item:
                print(item["id"])
    elif isinstance(data, dict):
        if "id" in data:
            print(data["id"])
        elif "data" in data:
            format_quiet(data["data"])
        elif "project" in data:
            format_quiet(data["project"])


# ============================================================================
# Helper Functions
# ============================================================================


def _parse(date_str: str | datetime) -> datetime | None:
    if isinstance(date_str, datetime):
        return date_str
    try:
        return datetime.fromisoformat(str(date_str).replace("Z", "+00:00"))
    except ValueError:
        return None


def format_date(date_str: str | datetime) -> str:
    """Format a timestamp as a local calendar date."""
    date = _parse(date_str)
    if date is None:
        return str(date_str)
    return date.strftime("%d %b %Y")


def format_relative_time(date_str: str | datetime | None) -> str:
    """Format timestamp as relative time."""
    if not date_str:
        return ""

    date = _parse(date_str)
    if date is None:
        return ""

    now = datetime.now(tz=UTC) if date.tzinfo is not None else datetime.now()
    seconds = (now - date).total_seconds()

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{int(seconds / 60)}m ago"
    if seconds < 86400:
        return f"{int(seconds / 3600)}h ago"
    days = int(seconds / 86400)
    return f"{days}d ago"


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    filled = max(0, min(10, int(percentage / 10)))
    return "▓" * filled + "░" * (10 - filled)


def get_health_color(score: float) -> str:
    """Get color based on a 0-100 health score."""
    if score >= 80:
        return "green"
    if score >= 40:
        return "yellow"
    return "red"
