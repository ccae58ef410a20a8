"""Decorators for command functions."""

import asyncio
import functools
import time
import traceback
from collections.abc import Callable

import typer
from pydantic import ValidationError

from projecthub.services.api.errors import APIError
from projecthub.services.errors import AppError
from projecthub.services.token_manager import get_token_manager
from projecthub.utils.exit_codes import (
    ERROR_AUTH_FAILURE,
    ERROR_INVALID_ARGS,
    exit_code_for_status,
    get_exit_code_name,
)
from projecthub.utils.logger import get_logger
from projecthub.utils.ui.formatters import format_error


def _require_auth() -> None:
    """Require a stored, unexpired token."""
    if not get_token_manager().is_authenticated():
        raise AppError(
            "Not logged in. Use 'projecthub auth login' to authenticate.",
            exit_code=ERROR_AUTH_FAILURE,
        )


def describe_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into ``field: message`` pairs."""
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "__root__")
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return ", ".join(parts)


def command_wrapper(_func: Callable | None = None, *, auth_required: bool = True):
    """Decorator to wrap command functions with common functionality.

    Checks authentication, runs async commands, logs timing, and turns
    errors into an error banner plus a semantic exit code.
    """

    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger = get_logger()
            cmd = func.__name__
            start = time.monotonic()
            logger.info("command started: %s", cmd)
            try:
                if auth_required:
                    _require_auth()

                if asyncio.iscoroutinefunction(func):
                    result = asyncio.run(func(*args, **kwargs))
                else:
                    result = func(*args, **kwargs)

                logger.info("command completed: %s (%.3fs)", cmd, time.monotonic() - start)
                return result

            except typer.Exit:
                raise

            except APIError as e:
                code = exit_code_for_status(e.status_code)
                logger.error(
                    "command failed: %s (%.3fs) - HTTP %s %s -> %s",
                    cmd,
                    time.monotonic() - start,
                    e.status_code,
                    e.details,
                    get_exit_code_name(code),
                )
                format_error(e.message)
                raise typer.Exit(code=code) from e

            except AppError as e:
                logger.error("command failed: %s (%.3fs) - %s", cmd, time.monotonic() - start, e)
                format_error(str(e))
                raise typer.Exit(code=e.exit_code) from e

            except ValidationError as e:
                message = describe_validation_error(e)
                logger.error("command failed: %s - invalid input: %s", cmd, message)
                format_error(message)
                raise typer.Exit(code=ERROR_INVALID_ARGS) from e

            except ValueError as e:
                logger.error("command failed: %s - %s", cmd, e)
                format_error(str(e))
                raise typer.Exit(code=ERROR_INVALID_ARGS) from e

            except Exception as e:
                logger.error(
                    "command failed: %s (%.3fs) - %s\n%s",
                    cmd,
                    time.monotonic() - start,
                    str(e),
                    traceback.format_exc(),
                )
                format_error(f"An unexpected error occurred: {str(e)}")
                raise typer.Exit(code=1) from e

        return wrapper

    if _func is None:
        return decorator
    return decorator(_func)
