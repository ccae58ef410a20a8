"""Unit tests for AIService."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from conftest import make_project, make_tag
from projecthub.models import (
    ProjectAnalysisResponse,
    ProjectSummaryResponse,
    TagSuggestionResponse,
)
from projecthub.services.ai_service import AIService
from projecthub.services.api.errors import APIError


@pytest.fixture()
def ai_api():
    api = MagicMock()
    api.suggest_tags = AsyncMock(
        return_value=TagSuggestionResponse(suggestions=["urgent", "backend"], confidence=0.8)
    )
    api.analyze_project = AsyncMock(
        return_value=ProjectAnalysisResponse(health_score=80.0, risk_factors=["scope"])
    )
    api.get_project_summary = AsyncMock(return_value=ProjectSummaryResponse(summary="On track"))
    return api


@pytest.fixture()
def tags_api():
    api = MagicMock()
    api.create_and_add_tag_to_project = AsyncMock(
        return_value=(make_tag(id="t9", name="urgent"), make_project())
    )
    return api


@pytest.fixture()
def projects_api():
    api = MagicMock()
    api.get_project_tags = AsyncMock(return_value=[make_tag(id="t1")])
    return api


@pytest.fixture()
def service(ai_api, tags_api, projects_api):
    return AIService(ai_api, tags_api, projects_api)


@pytest.mark.asyncio
async def test_suggest_tags_passes_project(service, ai_api):
    result = await service.suggest_tags("Build the login page", project_id="p1")

    ai_api.suggest_tags.assert_awaited_once_with("Build the login page", "p1")
    assert result.suggestions == ["urgent", "backend"]


@pytest.mark.asyncio
async def test_analyze_project(service):
    result = await service.analyze_project("p1")
    assert result.health_score == 80.0


@pytest.mark.asyncio
async def test_project_summary(service, ai_api):
    result = await service.project_summary("p1")

    ai_api.get_project_summary.assert_awaited_once_with("p1")
    assert result.summary == "On track"


@pytest.mark.asyncio
async def test_add_suggested_tag_uses_fixed_color_and_description(service, tags_api):
    tag, refreshed = await service.add_suggested_tag("p1", "urgent")

    project_id, payload = tags_api.create_and_add_tag_to_project.call_args.args
    assert project_id == "p1"
    assert payload.color == "#3B82F6"
    assert payload.description == "AI-suggested tag for project analysis"
    assert tag.name == "urgent"
    assert [t.id for t in refreshed] == ["t1"]


@pytest.mark.asyncio
async def test_add_suggested_tag_survives_refresh_failure(service, projects_api):
    projects_api.get_project_tags.side_effect = APIError(500, ["boom"])

    tag, refreshed = await service.add_suggested_tag("p1", "urgent")

    assert tag.id == "t9"
    assert refreshed is None


@pytest.mark.asyncio
async def test_add_suggested_tag_create_failure_propagates(service, tags_api, projects_api):
    tags_api.create_and_add_tag_to_project.side_effect = APIError(403, ["Forbidden"])

    with pytest.raises(APIError):
        await service.add_suggested_tag("p1", "urgent")
    projects_api.get_project_tags.assert_not_called()
