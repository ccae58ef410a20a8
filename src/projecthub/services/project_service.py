"""Project service - the logic behind the project pages.

Fetches go through the API client; the service only shapes data (dedupe,
counts, partial-failure fallbacks) and performs the basic form checks.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError

from projecthub.models import (
    InviteRequest,
    InviteResponse,
    PaginatedResponse,
    PaginationQuery,
    Project,
    ProjectCreate,
    ProjectMember,
    ProjectUpdate,
    Role,
    Tag,
)
from projecthub.services.api.client import APIClient
from projecthub.services.api.errors import APIError
from projecthub.services.api.projects import ProjectsAPI
from projecthub.services.api.tasks import TasksAPI
from projecthub.services.errors import PermissionDenied
from projecthub.utils.logger import get_logger

logger = get_logger("projects")

DASHBOARD_RECENT_LIMIT = 5


class ProjectDetail(BaseModel):
    """Everything the project detail view shows."""

    project: Project
    members: list[ProjectMember] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    task_count: int = 0


class Dashboard(BaseModel):
    recent_projects: list[Project] = Field(default_factory=list)
    owned_count: int = 0
    total_projects: int = 0


def dedupe_by_id(items: list) -> list:
    """Drop later records whose ``id`` was already seen, keeping order."""
    seen: set[str] = set()
    unique = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique


class ProjectService:
    """Service for project pages."""

    def __init__(self, projects_api: ProjectsAPI, tasks_api: TasksAPI):
        self.projects_api = projects_api
        self.tasks_api = tasks_api

    async def list_projects(
        self,
        *,
        page: int | None = None,
        limit: int | None = None,
        sort: str | None = None,
        order: str | None = None,
        search: str | None = None,
        tags: str | None = None,
    ) -> PaginatedResponse[Project]:
        """List a page of projects; an empty search term is not sent."""
        query = PaginationQuery(
            page=page,
            limit=limit,
            sort=sort,
            order=order,
            search=search or None,
            tags=tags or None,
        )
        return await self.projects_api.get_paginated_projects(query)

    async def dashboard(self) -> Dashboard:
        """Recent projects for the dashboard; a failed fetch shows an empty list."""
        try:
            page = await self.projects_api.get_paginated_projects(
                PaginationQuery(limit=DASHBOARD_RECENT_LIMIT)
            )
        except (APIError, ValidationError) as e:
            logger.warning("failed to load dashboard projects: %s", e)
            return Dashboard()
        return Dashboard(
            recent_projects=page.data,
            owned_count=sum(1 for p in page.data if Role.is_owner(p.user_role)),
            total_projects=page.meta.total_items,
        )

    async def get_project(self, project_id: str) -> Project:
        return await self.projects_api.get_project(project_id)

    async def load_project_detail(self, project_id: str) -> ProjectDetail:
        """Load a project with its members, tags and task count.

        The project itself must load. Members, tags and tasks are fetched
        independently; each one that fails falls back to an empty value so
        the others still show.
        """
        project = await self.projects_api.get_project(project_id)

        try:
            members = dedupe_by_id(await self.projects_api.get_project_members(project_id))
        except (APIError, ValidationError) as e:
            logger.warning("failed to load members for project %s: %s", project_id, e)
            members = []

        try:
            tags = await self.projects_api.get_project_tags(project_id)
        except (APIError, ValidationError) as e:
            logger.warning("failed to load tags for project %s: %s", project_id, e)
            tags = []

        try:
            task_count = len(await self.tasks_api.get_project_tasks(project_id))
        except (APIError, ValidationError) as e:
            logger.warning("failed to load tasks for project %s: %s", project_id, e)
            task_count = 0

        return ProjectDetail(project=project, members=members, tags=tags, task_count=task_count)

    async def create_project(self, name: str, description: str) -> Project:
        """Validate and create a project.

        Raises:
            pydantic.ValidationError: name must be 3-100 and description
                10-500 characters after trimming
        """
        payload = ProjectCreate(name=name, description=description)
        project = await self.projects_api.create_project(payload)
        logger.info("created project %s", project.id)
        return project

    async def load_for_edit(self, project_id: str) -> Project:
        """Load a project for editing; only its OWNER may edit it."""
        project = await self.projects_api.get_project(project_id)
        if not Role.is_owner(project.user_role):
            raise PermissionDenied("You don't have permission to edit this project")
        return project

    async def update_project(
        self,
        project_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
    ) -> Project:
        payload = ProjectUpdate(name=name, description=description)
        return await self.projects_api.update_project(project_id, payload)

    async def delete_project(self, project_id: str) -> None:
        await self.projects_api.delete_project(project_id)
        logger.info("deleted project %s", project_id)

    async def invite_user(
        self, project_id: str, email: str, role: Role | str = Role.VIEWER
    ) -> InviteResponse:
        """Invite *email* with *role*; surrounding whitespace is trimmed."""
        if not email or not email.strip():
            raise ValueError("Email is required")
        invite = InviteRequest(email=email, role=role)
        return await self.projects_api.invite_user(project_id, invite)

    async def list_members(self, project_id: str) -> list[ProjectMember]:
        return dedupe_by_id(await self.projects_api.get_project_members(project_id))


def get_project_service(client: APIClient) -> ProjectService:
    """Build a ProjectService on top of *client*."""
    return ProjectService(ProjectsAPI(client), TasksAPI(client))
