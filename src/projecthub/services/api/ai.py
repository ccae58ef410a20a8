"""AI assistant endpoints (computed entirely by the backend)."""

from __future__ import annotations

from urllib.parse import quote

from projecthub.models import (
    ProjectAnalysisResponse,
    ProjectSummaryResponse,
    SuggestTagsRequest,
    TagSuggestionResponse,
)
from projecthub.services.api.client import APIClient


class AIAPI:
    """AI features API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def suggest_tags(
        self, content: str, project_id: str | None = None
    ) -> TagSuggestionResponse:
        """Get tag suggestions for free text, optionally in a project's context."""
        payload = SuggestTagsRequest(content=content, project_id=project_id)
        data = await self.client.post("/api/ai/suggest-tags", json=payload.to_wire())
        return TagSuggestionResponse.model_validate(data)

    async def analyze_project(self, project_id: str) -> ProjectAnalysisResponse:
        data = await self.client.get(f"/api/ai/analyze-project/{quote(project_id, safe='')}")
        return ProjectAnalysisResponse.model_validate(data)

    async def get_project_summary(self, project_id: str) -> ProjectSummaryResponse:
        data = await self.client.get(f"/api/ai/project-summary/{quote(project_id, safe='')}")
        return ProjectSummaryResponse.model_validate(data)
