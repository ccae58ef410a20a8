"""Authentication commands."""

import typer
from rich.prompt import Prompt

from projecthub.services.api.auth import AuthAPI
from projecthub.services.api.client import get_client
from projecthub.services.auth_service import AuthService
from projecthub.services.token_manager import Session, get_token_manager
from projecthub.utils.typer_helpers import SuggestingGroup
from projecthub.utils.ui.console import get_console
from projecthub.utils.ui.formatters import format_info, format_output, format_success

from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Authentication commands")
console = get_console()


@app.command()
@command_wrapper(auth_required=False)
async def login(
    email: str | None = typer.Option(None, "--email", help="Email address"),
    password: str | None = typer.Option(None, "--password", help="Password"),
) -> None:
    """Log in and store the access token."""
    if not email:
        email = Prompt.ask("Email")
    if not password:
        password = Prompt.ask("Password", password=True)

    # No token is sent with the login request itself
    async with get_client(Session()) as client:
        user = await AuthService(AuthAPI(client)).login(email, password)

    format_success(f"Logged in as {user.name} <{user.email}>")


@app.command()
@command_wrapper(auth_required=False)
async def signup(
    name: str | None = typer.Option(None, "--name", help="Display name"),
    email: str | None = typer.Option(None, "--email", help="Email address"),
    password: str | None = typer.Option(None, "--password", help="Password"),
    auto_login: bool = typer.Option(
        True, "--auto-login/--no-auto-login", help="Log in after signing up"
    ),
) -> None:
    """Create a new account."""
    if not name:
        name = Prompt.ask("Name")
    if not email:
        email = Prompt.ask("Email")
    if not password:
        password = Prompt.ask("Password", password=True)
        if password != Prompt.ask("Confirm password", password=True):
            raise ValueError("Passwords do not match")

    async with get_client(Session()) as client:
        service = AuthService(AuthAPI(client))
        result = await service.signup(name, email, password)
        format_success(result.message or f"Account created for {result.user.email}")
        if auto_login:
            user = await service.login(email, password)
            format_success(f"Logged in as {user.name} <{user.email}>")


@app.command()
@command_wrapper(auth_required=False)
def logout() -> None:
    """Clear the stored token and user."""
    token_manager = get_token_manager()
    if not token_manager.get_token():
        format_info("Not logged in")
        return
    token_manager.logout()
    format_success("Logged out")


@app.command()
@command_wrapper
async def whoami(
    refresh: bool = typer.Option(False, "--refresh", help="Fetch the profile from the server"),
    output: str = typer.Option("pretty", "--output", "-o", help="Output format"),
) -> None:
    """Show the logged-in user."""
    async with get_client() as client:
        user = await AuthService(AuthAPI(client)).current_user(refresh=refresh)
    format_output(user.model_dump(mode="json"), output)
