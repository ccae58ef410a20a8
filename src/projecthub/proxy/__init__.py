"""Same-origin proxy forwarding ``/api`` calls to the backend service."""

from .app import create_app
from .forward import Route, forward

__all__ = ["create_app", "forward", "Route"]
