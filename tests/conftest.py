"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem/API state.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import patch

import pytest

from projecthub.models import Project, ProjectMember, Role, Tag, Task, User


# ---------------------------------------------------------------------------
# Config / storage isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Point config and token storage at *tmp_path* and reset cached services."""
    from projecthub.services.config_service import get_config_service
    from projecthub.services.token_manager import get_token_manager

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    monkeypatch.delenv("BACKEND_URL", raising=False)
    monkeypatch.delenv("PROJECTHUB_API_URL", raising=False)

    get_config_service.cache_clear()
    get_token_manager.cache_clear()
    with patch("projecthub.services.config_service.user_config_dir", return_value=config_dir):
        with patch("projecthub.services.config_service.user_data_dir", return_value=data_dir):
            with patch("projecthub.services.token_manager.user_data_dir", return_value=data_dir):
                yield tmp_path
    get_config_service.cache_clear()
    get_token_manager.cache_clear()


# ---------------------------------------------------------------------------
# Auth bypass
# ---------------------------------------------------------------------------


@pytest.fixture()
def bypass_auth():
    """Skip the stored-token check in command tests."""
    with patch("projecthub.commands.decorators._require_auth"):
        yield


# ---------------------------------------------------------------------------
# Sample records
# ---------------------------------------------------------------------------

NOW = datetime(2024, 1, 15, 10, 30)


def make_user(**overrides) -> User:
    data = {"id": "u1", "name": "Ada", "email": "ada@example.com"}
    data.update(overrides)
    return User(**data)


def make_project(**overrides) -> Project:
    data = {
        "id": "p1",
        "name": "Apollo",
        "description": "Moon landing programme",
        "created_at": NOW,
        "updated_at": NOW,
        "user_role": Role.OWNER,
        "member_count": 2,
    }
    data.update(overrides)
    return Project(**data)


def make_tag(**overrides) -> Tag:
    data = {"id": "t1", "name": "backend", "color": "#ff0000"}
    data.update(overrides)
    return Tag(**data)


def make_member(**overrides) -> ProjectMember:
    data = {"id": "u1", "name": "Ada", "email": "ada@example.com", "role": Role.OWNER}
    data.update(overrides)
    return ProjectMember(**data)


def make_task(**overrides) -> Task:
    data = {
        "id": "k1",
        "title": "Write docs",
        "project_id": "p1",
        "created_at": NOW,
        "updated_at": NOW,
    }
    data.update(overrides)
    return Task(**data)


# Wire (camelCase) project as the backend sends it.
PROJECT_JSON = {
    "id": "p1",
    "name": "Apollo",
    "description": "Moon landing programme",
    "createdAt": "2024-01-15T10:30:00Z",
    "updatedAt": "2024-01-15T10:30:00Z",
    "userRole": "OWNER",
    "memberCount": 2,
    "tags": [],
}
