"""Proxy route table, mirroring the backend 1:1 under ``/api``."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import Response

from .forward import Route, forward


def unwrap_members(data: Any) -> list:
    """The backend wraps members as ``{"members": [...]}``; relay the bare list."""
    if isinstance(data, dict):
        members = data.get("members")
        return members if isinstance(members, list) else []
    if isinstance(data, list):
        return data
    return []


NO_AUTH: tuple[str, ...] = ()

# Literal segments ("paginated") must precede the "{id}" routes they overlap.
ROUTES: list[Route] = [
    # auth
    Route("POST", "/api/auth/login", "/auth/login", "auth-login", forward_headers=NO_AUTH),
    Route("POST", "/api/auth/signup", "/auth/signup", "auth-signup", forward_headers=NO_AUTH),
    Route("GET", "/api/users/me", "/users/me", "users-me", require_auth=True),
    # projects
    Route("GET", "/api/projects", "/projects", "projects-list"),
    Route("POST", "/api/projects", "/projects", "projects-create"),
    Route("GET", "/api/projects/paginated", "/projects/paginated", "projects-paginated"),
    Route("GET", "/api/projects/{id}", "/projects/{id}", "project-get"),
    Route("PATCH", "/api/projects/{id}", "/projects/{id}", "project-update"),
    Route("DELETE", "/api/projects/{id}", "/projects/{id}", "project-delete"),
    Route("POST", "/api/projects/{id}/invite", "/projects/{id}/invite", "project-invite"),
    Route(
        "GET",
        "/api/projects/{id}/members",
        "/projects/{id}/members",
        "project-members",
        transform=unwrap_members,
    ),
    Route("GET", "/api/projects/{id}/tags", "/projects/{id}/tags", "project-tags"),
    Route("POST", "/api/projects/{id}/tags", "/projects/{id}/tags", "project-tags-add"),
    Route(
        "DELETE",
        "/api/projects/{id}/tags/{tag_id}",
        "/projects/{id}/tags/{tag_id}",
        "project-tag-remove",
        empty_on_success=True,
    ),
    Route("GET", "/api/projects/{id}/tasks", "/projects/{id}/tasks", "project-tasks"),
    Route("POST", "/api/projects/{id}/tasks", "/projects/{id}/tasks", "project-tasks-create"),
    # tasks
    Route("PATCH", "/api/tasks/{id}", "/tasks/{id}", "task-update"),
    Route("DELETE", "/api/tasks/{id}", "/tasks/{id}", "task-delete"),
    # tags
    Route("GET", "/api/tags", "/tags", "tags-list"),
    Route("POST", "/api/tags", "/tags", "tags-create"),
    Route("GET", "/api/tags/{id}", "/tags/{id}", "tag-get"),
    Route("PATCH", "/api/tags/{id}", "/tags/{id}", "tag-update"),
    Route("DELETE", "/api/tags/{id}", "/tags/{id}", "tag-delete", empty_on_success=True),
    # ai
    Route("POST", "/api/ai/suggest-tags", "/ai/suggest-tags", "ai-suggest-tags"),
    Route("GET", "/api/ai/analyze-project/{id}", "/ai/analyze-project/{id}", "ai-analyze-project"),
    Route("GET", "/api/ai/project-summary/{id}", "/ai/project-summary/{id}", "ai-project-summary"),
]


def _endpoint(route: Route):
    async def endpoint(request: Request) -> Response:
        return await forward(request, route, request.app.state.upstream)

    endpoint.__name__ = route.name.replace("-", "_")
    return endpoint


def build_router(routes: list[Route] | None = None) -> APIRouter:
    """Register one endpoint per route."""
    router = APIRouter()
    for route in routes if routes is not None else ROUTES:
        router.add_api_route(
            route.path,
            _endpoint(route),
            methods=[route.method],
            name=route.name,
        )
    return router
