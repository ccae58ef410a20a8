"""Tests for the wire models and request payloads."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from conftest import PROJECT_JSON
from projecthub.models import (
    AddTagsRequest,
    AuthResponse,
    InviteRequest,
    PaginationQuery,
    Project,
    ProjectUpdate,
    Role,
    Tag,
    Task,
    TaskStatus,
)


class TestWireModel:
    def test_reads_camel_case(self):
        project = Project.model_validate(PROJECT_JSON)
        assert project.user_role == Role.OWNER
        assert project.member_count == 2

    def test_accepts_snake_case(self):
        tag = Tag.model_validate({"id": "t1", "name": "x", "created_by": None})
        assert tag.created_by is None

    def test_ignores_unknown_keys(self):
        tag = Tag.model_validate({"id": "t1", "name": "x", "projects": [1, 2]})
        assert not hasattr(tag, "projects")

    def test_tag_default_color(self):
        assert Tag(id="t1", name="x").color == "#6366f1"

    def test_to_wire_uses_aliases_and_drops_none(self):
        payload = InviteRequest(email="bob@example.com", role=Role.CONTRIBUTOR)
        assert payload.to_wire() == {"email": "bob@example.com", "role": "CONTRIBUTOR"}
        assert AddTagsRequest(tag_ids=["t1"]).to_wire() == {"tagIds": ["t1"]}

    def test_task_nested_assignee(self):
        task = Task.model_validate(
            {
                "id": "k1",
                "title": "x",
                "status": "DOING",
                "projectId": "p1",
                "assignedTo": {"id": "u1", "name": "Ada", "email": "ada@example.com"},
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        )
        assert task.status == TaskStatus.DOING
        assert task.assigned_to.name == "Ada"

    def test_auth_response_token_is_snake_case(self):
        result = AuthResponse.model_validate(
            {"access_token": "jwt", "user": {"id": "u1", "name": "Ada", "email": "a@b.co"}}
        )
        assert result.access_token == "jwt"


class TestRole:
    def test_can_write(self):
        assert Role.can_write(Role.OWNER)
        assert Role.can_write("CONTRIBUTOR")
        assert not Role.can_write(Role.VIEWER)
        assert not Role.can_write(None)

    def test_is_owner(self):
        assert Role.is_owner("OWNER")
        assert not Role.is_owner(Role.CONTRIBUTOR)


class TestRequests:
    def test_invite_rejects_bad_email(self):
        with pytest.raises(ValidationError):
            InviteRequest(email="not-an-email")

    def test_invite_defaults_to_viewer(self):
        assert InviteRequest(email=" a@example.com ").role == Role.VIEWER

    def test_add_tags_requires_one(self):
        with pytest.raises(ValidationError):
            AddTagsRequest(tag_ids=[])

    def test_project_update_bounds(self):
        with pytest.raises(ValidationError):
            ProjectUpdate(description="short")
        assert ProjectUpdate().to_wire() == {}

    def test_pagination_params(self):
        query = PaginationQuery(page=3, limit=20, order="asc", tags="t1,t2")
        assert query.to_params() == {"page": "3", "limit": "20", "order": "asc", "tags": "t1,t2"}

    def test_pagination_rejects_zero_page(self):
        with pytest.raises(ValidationError):
            PaginationQuery(page=0)
