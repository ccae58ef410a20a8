"""Tags API endpoints."""

from __future__ import annotations

from urllib.parse import quote

from projecthub.models import Project, Tag, TagCreate, TagUpdate
from projecthub.services.api._util import validate_list
from projecthub.services.api.client import APIClient
from projecthub.services.api.projects import ProjectsAPI


def _tag_path(tag_id: str) -> str:
    return f"/api/tags/{quote(tag_id, safe='')}"


class TagsAPI:
    """Tags API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def create_tag(self, tag: TagCreate) -> Tag:
        data = await self.client.post("/api/tags", json=tag.to_wire())
        return Tag.model_validate(data)

    async def get_all_tags(self) -> list[Tag]:
        data = await self.client.get("/api/tags")
        return validate_list(Tag, data)

    async def get_tag(self, tag_id: str) -> Tag:
        data = await self.client.get(_tag_path(tag_id))
        return Tag.model_validate(data)

    async def update_tag(self, tag_id: str, updates: TagUpdate) -> Tag:
        """Update a tag (creator only)."""
        data = await self.client.patch(_tag_path(tag_id), json=updates.to_wire())
        return Tag.model_validate(data)

    async def delete_tag(self, tag_id: str) -> None:
        """Delete a tag (creator only)."""
        await self.client.delete(_tag_path(tag_id))

    async def create_and_add_tag_to_project(
        self, project_id: str, tag: TagCreate
    ) -> tuple[Tag, Project]:
        """Create a tag, then associate it with *project_id*."""
        created = await self.create_tag(tag)
        project = await ProjectsAPI(self.client).add_tags_to_project(project_id, [created.id])
        return created, project
