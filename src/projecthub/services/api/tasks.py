"""Tasks API endpoints."""

from __future__ import annotations

from urllib.parse import quote

from projecthub.models import Task, TaskCreate, TaskUpdate
from projecthub.services.api._util import validate_list
from projecthub.services.api.client import APIClient


class TasksAPI:
    """Tasks API client."""

    def __init__(self, client: APIClient):
        self.client = client

    async def create_task(self, project_id: str, task: TaskCreate) -> Task:
        """Create a new task in a project."""
        data = await self.client.post(
            f"/api/projects/{quote(project_id, safe='')}/tasks", json=task.to_wire()
        )
        return Task.model_validate(data)

    async def get_project_tasks(self, project_id: str) -> list[Task]:
        data = await self.client.get(f"/api/projects/{quote(project_id, safe='')}/tasks")
        return validate_list(Task, data)

    async def update_task(self, task_id: str, updates: TaskUpdate) -> Task:
        data = await self.client.patch(
            f"/api/tasks/{quote(task_id, safe='')}", json=updates.to_wire()
        )
        return Task.model_validate(data)

    async def delete_task(self, task_id: str) -> dict | None:
        return await self.client.delete(f"/api/tasks/{quote(task_id, safe='')}")
