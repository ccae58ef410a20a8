"""Task service - tasks within a project."""

from __future__ import annotations

from projecthub.models import Task, TaskCreate, TaskStatus, TaskUpdate
from projecthub.services.api.client import APIClient
from projecthub.services.api.tasks import TasksAPI


class TaskService:
    """Service for task management."""

    def __init__(self, tasks_api: TasksAPI):
        self.tasks_api = tasks_api

    async def list_tasks(
        self, project_id: str, status: TaskStatus | str | None = None
    ) -> list[Task]:
        """List a project's tasks, optionally only those in *status*."""
        tasks = await self.tasks_api.get_project_tasks(project_id)
        if status is None:
            return tasks
        wanted = TaskStatus(status)
        return [task for task in tasks if task.status == wanted]

    async def create_task(
        self,
        project_id: str,
        title: str,
        *,
        description: str = "",
        status: TaskStatus | str | None = None,
        assigned_to_id: str | None = None,
    ) -> Task:
        payload = TaskCreate(
            title=title,
            description=description,
            status=status,
            assigned_to_id=assigned_to_id or None,
        )
        return await self.tasks_api.create_task(project_id, payload)

    async def update_task(
        self,
        task_id: str,
        *,
        title: str | None = None,
        description: str | None = None,
        status: TaskStatus | str | None = None,
        assigned_to_id: str | None = None,
    ) -> Task:
        payload = TaskUpdate(
            title=title,
            description=description,
            status=status,
            assigned_to_id=assigned_to_id,
        )
        return await self.tasks_api.update_task(task_id, payload)

    async def set_status(self, task_id: str, status: TaskStatus | str) -> Task:
        return await self.tasks_api.update_task(task_id, TaskUpdate(status=status))

    async def delete_task(self, task_id: str) -> None:
        await self.tasks_api.delete_task(task_id)


def group_by_status(tasks: list[Task]) -> dict[TaskStatus, list[Task]]:
    """Bucket tasks into TODO / DOING / DONE, keeping their order."""
    groups: dict[TaskStatus, list[Task]] = {status: [] for status in TaskStatus}
    for task in tasks:
        groups[task.status].append(task)
    return groups


def get_task_service(client: APIClient) -> TaskService:
    return TaskService(TasksAPI(client))
