"""Tests for the top-level CLI."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from conftest import make_project, make_user
from projecthub import __version__
from projecthub.main import app
from projecthub.services.project_service import Dashboard
from projecthub.services.token_manager import get_token_manager

runner = CliRunner()


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "projects" in result.output
    assert "serve" in result.output


@pytest.mark.parametrize("group", ["auth", "projects", "tags", "tasks", "ai", "config"])
def test_groups_registered(group):
    result = runner.invoke(app, [group, "--help"])
    assert result.exit_code == 0


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_typo_suggests_command():
    result = runner.invoke(app, ["projets"])
    assert result.exit_code != 0
    assert "projects" in result.output


def test_serve_runs_uvicorn():
    with patch("projecthub.commands.serve.uvicorn.run") as run:
        result = runner.invoke(
            app, ["serve", "--port", "9100", "--backend-url", "http://backend:3000"]
        )

    assert result.exit_code == 0, result.output
    fastapi_app = run.call_args.args[0]
    assert fastapi_app.state.backend_url == "http://backend:3000"
    assert run.call_args.kwargs["port"] == 9100
    assert run.call_args.kwargs["host"] == "127.0.0.1"


class TestDashboard:
    @pytest.fixture
    def service(self):
        svc = MagicMock()
        svc.dashboard = AsyncMock(
            return_value=Dashboard(recent_projects=[make_project()], owned_count=1, total_projects=7)
        )
        with patch("projecthub.commands.dashboard.get_client", return_value=AsyncMock()):
            with patch("projecthub.commands.dashboard.get_project_service", return_value=svc):
                yield svc

    def test_requires_login(self, service):
        result = runner.invoke(app, ["dashboard"])
        assert result.exit_code == 3

    def test_pretty(self, service):
        store = get_token_manager()
        store.set_token("tok")
        store.set_user(make_user())

        result = runner.invoke(app, ["dashboard"])

        assert result.exit_code == 0, result.output
        assert "Welcome back, Ada" in result.output
        assert "Apollo" in result.output

    def test_json(self, service):
        store = get_token_manager()
        store.set_token("tok")
        store.set_user(make_user())

        result = runner.invoke(app, ["dashboard", "-o", "json"])

        data = json.loads(result.output)
        assert data["total_projects"] == 7
        assert data["user"]["email"] == "ada@example.com"
