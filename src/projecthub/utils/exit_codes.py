"""
Exit codes for the ProjectHub CLI.

Semantic exit codes so scripts can tell an auth failure from a missing
resource or an unreachable backend.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Authentication failure (not logged in, invalid credentials, etc.)
ERROR_AUTH_FAILURE = 3

# Network or API error (server unreachable, invalid upstream response)
ERROR_NETWORK = 4

# Resource not found
ERROR_NOT_FOUND = 5

# Permission denied
ERROR_PERMISSION_DENIED = 6


_STATUS_EXIT_CODES = {
    400: ERROR_INVALID_ARGS,
    401: ERROR_AUTH_FAILURE,
    403: ERROR_PERMISSION_DENIED,
    404: ERROR_NOT_FOUND,
    422: ERROR_INVALID_ARGS,
    502: ERROR_NETWORK,
    503: ERROR_NETWORK,
}


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_AUTH_FAILURE: "ERROR_AUTH_FAILURE",
        ERROR_NETWORK: "ERROR_NETWORK",
        ERROR_NOT_FOUND: "ERROR_NOT_FOUND",
        ERROR_PERMISSION_DENIED: "ERROR_PERMISSION_DENIED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def exit_code_for_status(status_code: int) -> int:
    """Map an HTTP status relayed by the proxy to a CLI exit code."""
    return _STATUS_EXIT_CODES.get(status_code, ERROR_GENERAL)
