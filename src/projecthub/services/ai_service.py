"""AI assistant features: thin wrappers over the backend's AI endpoints."""

from __future__ import annotations

from pydantic import ValidationError

from projecthub.models import (
    ProjectAnalysisResponse,
    ProjectSummaryResponse,
    Tag,
    TagCreate,
    TagSuggestionResponse,
)
from projecthub.services.api.ai import AIAPI
from projecthub.services.api.client import APIClient
from projecthub.services.api.errors import APIError
from projecthub.services.api.projects import ProjectsAPI
from projecthub.services.api.tags import TagsAPI
from projecthub.utils.logger import get_logger

logger = get_logger("ai")

SUGGESTED_TAG_COLOR = "#3B82F6"
SUGGESTED_TAG_DESCRIPTION = "AI-suggested tag for project analysis"


class AIService:
    """Service for AI features."""

    def __init__(self, ai_api: AIAPI, tags_api: TagsAPI, projects_api: ProjectsAPI):
        self.ai_api = ai_api
        self.tags_api = tags_api
        self.projects_api = projects_api

    async def suggest_tags(
        self, content: str, project_id: str | None = None
    ) -> TagSuggestionResponse:
        return await self.ai_api.suggest_tags(content, project_id)

    async def analyze_project(self, project_id: str) -> ProjectAnalysisResponse:
        return await self.ai_api.analyze_project(project_id)

    async def project_summary(self, project_id: str) -> ProjectSummaryResponse:
        return await self.ai_api.get_project_summary(project_id)

    async def add_suggested_tag(self, project_id: str, name: str) -> tuple[Tag, list[Tag] | None]:
        """Create a suggested tag, attach it, and refresh the project's tags.

        Returns the created tag and the refreshed tag list, or None when the
        refresh failed (the tag was still added).
        """
        tag, _ = await self.tags_api.create_and_add_tag_to_project(
            project_id,
            TagCreate(
                name=name,
                color=SUGGESTED_TAG_COLOR,
                description=SUGGESTED_TAG_DESCRIPTION,
            ),
        )
        try:
            refreshed = await self.projects_api.get_project_tags(project_id)
        except (APIError, ValidationError) as e:
            logger.warning("failed to refresh tags for project %s: %s", project_id, e)
            refreshed = None
        return tag, refreshed


def get_ai_service(client: APIClient) -> AIService:
    return AIService(AIAPI(client), TagsAPI(client), ProjectsAPI(client))
