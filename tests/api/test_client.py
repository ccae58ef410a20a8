"""Tests for the API client and the resource endpoint wrappers."""

from __future__ import annotations

import json

import httpx
import pytest

from conftest import PROJECT_JSON
from projecthub.models import (
    PaginationQuery,
    ProjectCreate,
    Role,
    TagCreate,
    TaskStatus,
    TaskUpdate,
)
from projecthub.services.api import (
    AIAPI,
    APIClient,
    APIConnectionError,
    APIError,
    AuthAPI,
    ProjectsAPI,
    TagsAPI,
    TasksAPI,
)
from projecthub.services.token_manager import Session

BASE = "http://proxy.test"


def make_client(handler, token: str | None = "abc") -> APIClient:
    return APIClient(
        Session(token=token), base_url=BASE, transport=httpx.MockTransport(handler)
    )


def json_response(status: int, data) -> httpx.Response:
    return httpx.Response(status, json=data)


# ---------------------------------------------------------------------------
# APIClient
# ---------------------------------------------------------------------------


class TestAPIClient:
    def test_defaults_come_from_config(self):
        client = APIClient(Session())
        assert client.base_url == "http://localhost:8000"
        assert client.timeout == 30
        assert client._client is None

    def test_env_overrides_endpoint(self, monkeypatch):
        monkeypatch.setenv("PROJECTHUB_API_URL", "http://elsewhere:9000/")
        client = APIClient(Session())
        assert client.base_url == "http://elsewhere:9000"

    def test_headers_with_token(self):
        client = APIClient(Session(token="abc"), base_url=BASE)
        headers = client._get_headers()
        assert headers["Authorization"] == "Bearer abc"
        assert headers["Content-Type"] == "application/json"

    def test_headers_without_token(self):
        client = APIClient(Session(), base_url=BASE)
        assert "Authorization" not in client._get_headers()

    def test_skip_auth(self):
        client = APIClient(Session(token="abc"), base_url=BASE)
        assert "Authorization" not in client._get_headers(skip_auth=True)

    @pytest.mark.asyncio
    async def test_get_returns_json(self):
        seen = []

        def handler(request):
            seen.append(request)
            return json_response(200, {"ok": True})

        async with make_client(handler) as client:
            data = await client.get("/api/tags", params={"a": "1"})

        assert data == {"ok": True}
        assert seen[0].url == httpx.URL(f"{BASE}/api/tags?a=1")
        assert seen[0].headers["authorization"] == "Bearer abc"

    @pytest.mark.asyncio
    async def test_204_returns_none(self):
        async with make_client(lambda r: httpx.Response(204)) as client:
            assert await client.delete("/api/tags/t1") is None

    @pytest.mark.asyncio
    async def test_non_json_content_type_returns_none(self):
        def handler(request):
            return httpx.Response(200, text="done", headers={"content-type": "text/plain"})

        async with make_client(handler) as client:
            assert await client.post("/api/x") is None

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self):
        def handler(request):
            return httpx.Response(
                200, content=b"{oops", headers={"content-type": "application/json"}
            )

        async with make_client(handler) as client:
            with pytest.raises(APIError) as exc_info:
                await client.get("/api/tags")

        assert exc_info.value.details == ["Invalid response from server"]

    @pytest.mark.asyncio
    async def test_error_with_string_message(self):
        body = {"statusCode": 404, "message": "Tag not found", "error": "Not Found"}

        async with make_client(lambda r: json_response(404, body)) as client:
            with pytest.raises(APIError) as exc_info:
                await client.patch("/api/tags/t1", json={"name": "x"})

        error = exc_info.value
        assert error.status_code == 404
        assert error.details == ["Tag not found"]
        assert error.error == "Not Found"
        assert error.payload == body

    @pytest.mark.asyncio
    async def test_error_with_list_message(self):
        body = {
            "statusCode": 400,
            "message": ["name must be longer", "description is required"],
            "error": "Bad Request",
        }

        async with make_client(lambda r: json_response(400, body)) as client:
            with pytest.raises(APIError) as exc_info:
                await client.post("/api/projects", json={})

        assert exc_info.value.details == ["name must be longer", "description is required"]
        assert str(exc_info.value) == "name must be longer, description is required"

    @pytest.mark.asyncio
    async def test_error_without_body(self):
        async with make_client(lambda r: httpx.Response(500)) as client:
            with pytest.raises(APIError) as exc_info:
                await client.get("/api/projects")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Request failed with status 500"

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused")

        async with make_client(handler) as client:
            with pytest.raises(APIConnectionError) as exc_info:
                await client.get("/api/projects")

        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_close_resets_client(self):
        client = make_client(lambda r: json_response(200, {}))
        await client.get("/api/tags")
        assert client._client is not None
        await client.close()
        assert client._client is None


class TestAPIErrorFromPayload:
    def test_plain_string_payload(self):
        error = APIError.from_payload(502, "gateway down")
        assert error.details == ["gateway down"]

    def test_message_only(self):
        error = APIError.from_payload(503, {"message": "Unable to connect to backend service"})
        assert error.message == "Unable to connect to backend service"

    def test_falls_back_to_error_field(self):
        error = APIError.from_payload(409, {"error": "Conflict"})
        assert error.details == ["Conflict"]


# ---------------------------------------------------------------------------
# Resource APIs
# ---------------------------------------------------------------------------


class Backend:
    """Route table keyed by (method, path) for MockTransport."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes[(request.method, request.url.path)]
        if body is None:
            return httpx.Response(status)
        return json_response(status, body)

    def body(self, index: int = -1):
        return json.loads(self.requests[index].content)


@pytest.mark.asyncio
async def test_login_sends_no_token_and_parses_response():
    backend = Backend(
        {
            ("POST", "/api/auth/login"): (
                200,
                {"access_token": "jwt", "user": {"id": "u1", "name": "Ada", "email": "ada@example.com"}},
            )
        }
    )
    async with make_client(backend) as client:
        result = await AuthAPI(client).login("ada@example.com", "secret")

    assert result.access_token == "jwt"
    assert result.user.name == "Ada"
    assert "authorization" not in backend.requests[0].headers
    assert backend.body() == {"email": "ada@example.com", "password": "secret"}


@pytest.mark.asyncio
async def test_signup_uses_signup_route():
    backend = Backend(
        {
            ("POST", "/api/auth/signup"): (
                201,
                {"message": "ok", "user": {"id": "u2", "name": "Bob", "email": "bob@example.com"}},
            )
        }
    )
    async with make_client(backend, token=None) as client:
        result = await AuthAPI(client).register("Bob", "bob@example.com", "pw")

    assert result.user.id == "u2"
    assert backend.body() == {"name": "Bob", "email": "bob@example.com", "password": "pw"}


@pytest.mark.asyncio
async def test_paginated_projects_sends_only_set_params():
    page = {
        "data": [PROJECT_JSON],
        "meta": {
            "currentPage": 1,
            "totalPages": 1,
            "totalItems": 1,
            "itemsPerPage": 10,
            "hasNextPage": False,
            "hasPreviousPage": False,
        },
    }
    backend = Backend({("GET", "/api/projects/paginated"): (200, page)})
    async with make_client(backend) as client:
        result = await ProjectsAPI(client).get_paginated_projects(
            PaginationQuery(page=1, sort="createdAt", order="desc")
        )

    params = backend.requests[0].url.params
    assert dict(params) == {"page": "1", "sort": "createdAt", "order": "desc"}
    assert result.meta.total_items == 1
    assert result.data[0].user_role == Role.OWNER


@pytest.mark.asyncio
async def test_create_project_posts_camel_case_body():
    backend = Backend({("POST", "/api/projects"): (201, PROJECT_JSON)})
    async with make_client(backend) as client:
        project = await ProjectsAPI(client).create_project(
            ProjectCreate(name="  Apollo ", description="Moon landing programme")
        )

    assert backend.body() == {"name": "Apollo", "description": "Moon landing programme"}
    assert project.member_count == 2


@pytest.mark.asyncio
async def test_project_ids_are_quoted():
    backend = Backend({("GET", "/api/projects/a/b"): (200, PROJECT_JSON)})
    async with make_client(backend) as client:
        await ProjectsAPI(client).get_project("a/b")

    assert backend.requests[0].url.raw_path == b"/api/projects/a%2Fb"


@pytest.mark.asyncio
async def test_members_non_list_reads_as_empty():
    backend = Backend({("GET", "/api/projects/p1/members"): (200, {"unexpected": True})})
    async with make_client(backend) as client:
        assert await ProjectsAPI(client).get_project_members("p1") == []


@pytest.mark.asyncio
async def test_add_tags_sends_tag_ids():
    backend = Backend({("POST", "/api/projects/p1/tags"): (200, PROJECT_JSON)})
    async with make_client(backend) as client:
        await ProjectsAPI(client).add_tags_to_project("p1", ["t1", "t2"])

    assert backend.body() == {"tagIds": ["t1", "t2"]}


@pytest.mark.asyncio
async def test_remove_tag_accepts_empty_response():
    backend = Backend({("DELETE", "/api/projects/p1/tags/t1"): (204, None)})
    async with make_client(backend) as client:
        assert await ProjectsAPI(client).remove_tag_from_project("p1", "t1") is None


@pytest.mark.asyncio
async def test_create_and_add_tag_to_project():
    tag = {"id": "t9", "name": "urgent", "color": "#3B82F6"}
    backend = Backend(
        {
            ("POST", "/api/tags"): (201, tag),
            ("POST", "/api/projects/p1/tags"): (200, PROJECT_JSON),
        }
    )
    async with make_client(backend) as client:
        created, project = await TagsAPI(client).create_and_add_tag_to_project(
            "p1", TagCreate(name="urgent")
        )

    assert created.id == "t9"
    assert project.id == "p1"
    assert backend.body(-1) == {"tagIds": ["t9"]}


@pytest.mark.asyncio
async def test_task_update_sends_status_only():
    task = {
        "id": "k1",
        "title": "Write docs",
        "status": "DONE",
        "projectId": "p1",
        "createdAt": "2024-01-15T10:30:00Z",
        "updatedAt": "2024-01-15T10:30:00Z",
    }
    backend = Backend({("PATCH", "/api/tasks/k1"): (200, task)})
    async with make_client(backend) as client:
        result = await TasksAPI(client).update_task("k1", TaskUpdate(status=TaskStatus.DONE))

    assert backend.body() == {"status": "DONE"}
    assert result.status == TaskStatus.DONE


@pytest.mark.asyncio
async def test_ai_suggest_tags():
    backend = Backend(
        {("POST", "/api/ai/suggest-tags"): (200, {"suggestions": ["api", "infra"], "confidence": 0.8})}
    )
    async with make_client(backend) as client:
        result = await AIAPI(client).suggest_tags("Build the API", project_id="p1")

    assert backend.body() == {"content": "Build the API", "projectId": "p1"}
    assert result.suggestions == ["api", "infra"]


@pytest.mark.asyncio
async def test_ai_analysis_parses_camel_case():
    analysis = {
        "healthScore": 72.5,
        "riskFactors": ["scope creep"],
        "recommendations": ["cut scope"],
        "predictedCompletionDate": "2024-03-01",
        "bottlenecks": [],
    }
    backend = Backend({("GET", "/api/ai/analyze-project/p1"): (200, analysis)})
    async with make_client(backend) as client:
        result = await AIAPI(client).analyze_project("p1")

    assert result.health_score == 72.5
    assert result.risk_factors == ["scope creep"]


@pytest.mark.asyncio
async def test_get_projects_lists_all():
    backend = Backend({("GET", "/api/projects"): (200, [PROJECT_JSON, {**PROJECT_JSON, "id": "p2"}])})
    async with make_client(backend) as client:
        projects = await ProjectsAPI(client).get_projects()

    assert [p.id for p in projects] == ["p1", "p2"]
