"""Projects API endpoints."""

from __future__ import annotations

from urllib.parse import quote

from projecthub.models import (
    AddTagsRequest,
    InviteRequest,
    InviteResponse,
    PaginatedResponse,
    PaginationQuery,
    Project,
    ProjectCreate,
    ProjectMember,
    ProjectUpdate,
    Tag,
)
from projecthub.services.api._util import validate_list
from projecthub.services.api.client import APIClient


def _project_path(project_id: str, *rest: str) -> str:
    parts = ["/api/projects", quote(project_id, safe="")]
    parts.extend(quote(part, safe="") for part in rest)
    return "/".join(parts)


class ProjectsAPI:
    """Projects API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def create_project(self, project: ProjectCreate) -> Project:
        """Create a new project."""
        data = await self.client.post("/api/projects", json=project.to_wire())
        return Project.model_validate(data)

    async def get_projects(self) -> list[Project]:
        """Get all projects for the authenticated user."""
        data = await self.client.get("/api/projects")
        return validate_list(Project, data)

    async def get_paginated_projects(
        self, query: PaginationQuery | None = None
    ) -> PaginatedResponse[Project]:
        """Get a page of projects with filtering and sorting."""
        params = (query or PaginationQuery()).to_params()
        data = await self.client.get("/api/projects/paginated", params=params or None)
        return PaginatedResponse[Project].model_validate(data)

    async def get_project(self, project_id: str) -> Project:
        data = await self.client.get(_project_path(project_id))
        return Project.model_validate(data)

    async def update_project(self, project_id: str, updates: ProjectUpdate) -> Project:
        """Update project details (OWNER only)."""
        data = await self.client.patch(_project_path(project_id), json=updates.to_wire())
        return Project.model_validate(data)

    async def delete_project(self, project_id: str) -> dict | None:
        """Delete a project permanently (OWNER only)."""
        return await self.client.delete(_project_path(project_id))

    async def invite_user(self, project_id: str, invite: InviteRequest) -> InviteResponse:
        """Invite a user to the project (OWNER only)."""
        data = await self.client.post(
            _project_path(project_id, "invite"), json=invite.to_wire()
        )
        return InviteResponse.model_validate(data)

    async def get_project_members(self, project_id: str) -> list[ProjectMember]:
        data = await self.client.get(_project_path(project_id, "members"))
        return validate_list(ProjectMember, data)

    async def get_project_tags(self, project_id: str) -> list[Tag]:
        data = await self.client.get(_project_path(project_id, "tags"))
        return validate_list(Tag, data)

    async def add_tags_to_project(self, project_id: str, tag_ids: list[str]) -> Project:
        """Associate existing tags with a project (OWNER, CONTRIBUTOR)."""
        payload = AddTagsRequest(tag_ids=tag_ids)
        data = await self.client.post(_project_path(project_id, "tags"), json=payload.to_wire())
        return Project.model_validate(data)

    async def remove_tag_from_project(self, project_id: str, tag_id: str) -> None:
        """Remove a tag from a project (OWNER, CONTRIBUTOR)."""
        await self.client.delete(_project_path(project_id, "tags", tag_id))
