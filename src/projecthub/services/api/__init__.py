"""Typed async clients for the proxy's ``/api`` routes."""

from .ai import AIAPI
from .auth import AuthAPI
from .client import APIClient, get_client
from .errors import APIConnectionError, APIError, AuthenticationRequired
from .projects import ProjectsAPI
from .tags import TagsAPI
from .tasks import TasksAPI

__all__ = [
    "APIClient",
    "get_client",
    "APIError",
    "APIConnectionError",
    "AuthenticationRequired",
    "AuthAPI",
    "ProjectsAPI",
    "TagsAPI",
    "TasksAPI",
    "AIAPI",
]
