"""Typer helper utilities."""

from typer.core import TyperGroup

# Alternate spellings accepted for command names in any group.
COMMAND_ALIASES = {
    "project": "projects",
    "tag": "tags",
    "task": "tasks",
    "ls": "list",
    "show": "get",
    "rm": "delete",
    "new": "create",
    "edit": "update",
}


class SuggestingGroup(TyperGroup):
    """Typer group that accepts command aliases.

    Unknown names still fall through to typer's own "Did you mean" usage error.
    """

    def get_command(self, ctx, cmd_name):
        command = super().get_command(ctx, cmd_name)
        if command is None and cmd_name in COMMAND_ALIASES:
            command = super().get_command(ctx, COMMAND_ALIASES[cmd_name])
        return command
