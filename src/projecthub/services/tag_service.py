"""Tag service - global tags and their project associations."""

from __future__ import annotations

from projecthub.models import Tag, TagCreate, TagUpdate
from projecthub.services.api.client import APIClient
from projecthub.services.api.projects import ProjectsAPI
from projecthub.services.api.tags import TagsAPI
from projecthub.utils.logger import get_logger

logger = get_logger("tags")

DEFAULT_TAG_COLOR = "#6366f1"


class TagService:
    """Service for tag management."""

    def __init__(self, tags_api: TagsAPI, projects_api: ProjectsAPI):
        self.tags_api = tags_api
        self.projects_api = projects_api

    async def list_tags(self) -> list[Tag]:
        return await self.tags_api.get_all_tags()

    async def get_tag(self, tag_id: str) -> Tag:
        return await self.tags_api.get_tag(tag_id)

    async def create_tag(
        self,
        name: str,
        *,
        color: str | None = DEFAULT_TAG_COLOR,
        description: str | None = None,
    ) -> Tag:
        return await self.tags_api.create_tag(
            TagCreate(name=name, color=color, description=description or None)
        )

    async def update_tag(
        self,
        tag_id: str,
        *,
        name: str | None = None,
        color: str | None = None,
        description: str | None = None,
    ) -> Tag:
        return await self.tags_api.update_tag(
            tag_id, TagUpdate(name=name, color=color, description=description)
        )

    async def delete_tag(self, tag_id: str) -> None:
        await self.tags_api.delete_tag(tag_id)

    async def project_tags(self, project_id: str) -> list[Tag]:
        return await self.projects_api.get_project_tags(project_id)

    async def available_tags(self, project_id: str) -> list[Tag]:
        """All tags not yet associated with *project_id*."""
        all_tags = await self.tags_api.get_all_tags()
        attached = {tag.id for tag in await self.projects_api.get_project_tags(project_id)}
        return [tag for tag in all_tags if tag.id not in attached]

    async def add_tags(self, project_id: str, tag_ids: list[str]) -> list[Tag]:
        """Attach tags, then return the project's refreshed tag list."""
        await self.projects_api.add_tags_to_project(project_id, tag_ids)
        return await self.projects_api.get_project_tags(project_id)

    async def remove_tag(
        self, project_id: str, tag_id: str, current: list[Tag] | None = None
    ) -> list[Tag]:
        """Detach a tag and return the remaining tags.

        When the caller already holds the project's tags they are filtered
        locally instead of being fetched again.
        """
        await self.projects_api.remove_tag_from_project(project_id, tag_id)
        if current is None:
            return await self.projects_api.get_project_tags(project_id)
        return [tag for tag in current if tag.id != tag_id]


def get_tag_service(client: APIClient) -> TagService:
    return TagService(TagsAPI(client), ProjectsAPI(client))
