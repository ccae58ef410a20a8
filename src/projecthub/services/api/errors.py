"""Error types raised by the API client.

The backend reports errors as ``{"statusCode", "message", "error"}`` where
``message`` is either a string or a list of strings. Both shapes collapse
into a single ``details`` list here.
"""

from __future__ import annotations

from typing import Any


class APIError(Exception):
    """Non-success response relayed by the proxy."""

    def __init__(
        self,
        status_code: int,
        details: list[str] | None = None,
        error: str | None = None,
        payload: Any = None,
    ):
        self.status_code = status_code
        self.details = details or [error or f"Request failed with status {status_code}"]
        self.error = error
        self.payload = payload
        super().__init__(", ".join(self.details))

    @classmethod
    def from_payload(cls, status_code: int, payload: Any) -> APIError:
        """Build an error from a decoded error body of any shape."""
        details: list[str] = []
        error = None
        if isinstance(payload, dict):
            message = payload.get("message")
            if isinstance(message, list):
                details = [str(m) for m in message]
            elif message:
                details = [str(message)]
            error = payload.get("error")
            if error is not None:
                error = str(error)
        elif isinstance(payload, str) and payload:
            details = [payload]
        return cls(status_code, details=details, error=error, payload=payload)

    @property
    def message(self) -> str:
        return ", ".join(self.details)


class APIConnectionError(APIError):
    """The proxy could not be reached at all."""

    def __init__(self, details: list[str] | None = None):
        super().__init__(503, details=details or ["Unable to connect to server"])


class AuthenticationRequired(APIError):
    """No stored token; the user must log in first."""

    def __init__(self):
        super().__init__(401, details=["Not logged in. Use 'projecthub auth login' to authenticate."])
