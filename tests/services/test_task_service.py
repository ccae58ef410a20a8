"""Unit tests for TaskService."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from pydantic import ValidationError

from conftest import make_task
from projecthub.models import TaskStatus
from projecthub.services.task_service import TaskService, group_by_status


@pytest.fixture()
def tasks_api():
    api = MagicMock()
    api.get_project_tasks = AsyncMock(
        return_value=[
            make_task(id="k1", status=TaskStatus.TODO),
            make_task(id="k2", status=TaskStatus.DONE),
            make_task(id="k3", status=TaskStatus.TODO),
        ]
    )
    api.create_task = AsyncMock(return_value=make_task())
    api.update_task = AsyncMock(return_value=make_task(status=TaskStatus.DOING))
    api.delete_task = AsyncMock(return_value=None)
    return api


@pytest.fixture()
def service(tasks_api):
    return TaskService(tasks_api)


@pytest.mark.asyncio
async def test_list_all(service):
    assert [t.id for t in await service.list_tasks("p1")] == ["k1", "k2", "k3"]


@pytest.mark.asyncio
async def test_list_filters_by_status(service):
    tasks = await service.list_tasks("p1", status="TODO")
    assert [t.id for t in tasks] == ["k1", "k3"]


@pytest.mark.asyncio
async def test_list_rejects_unknown_status(service):
    with pytest.raises(ValueError):
        await service.list_tasks("p1", status="BLOCKED")


@pytest.mark.asyncio
async def test_create_task_payload(service, tasks_api):
    await service.create_task("p1", " Ship it ", assigned_to_id="")

    project_id, payload = tasks_api.create_task.call_args.args
    assert project_id == "p1"
    assert payload.to_wire() == {"title": "Ship it", "description": ""}


@pytest.mark.asyncio
async def test_create_task_requires_title(service):
    with pytest.raises(ValidationError):
        await service.create_task("p1", "   ")


@pytest.mark.asyncio
async def test_set_status(service, tasks_api):
    task = await service.set_status("k1", TaskStatus.DOING)

    task_id, payload = tasks_api.update_task.call_args.args
    assert task_id == "k1"
    assert payload.to_wire() == {"status": "DOING"}
    assert task.status == TaskStatus.DOING


@pytest.mark.asyncio
async def test_delete(service, tasks_api):
    await service.delete_task("k1")
    tasks_api.delete_task.assert_awaited_once_with("k1")


def test_group_by_status():
    tasks = [
        make_task(id="a", status=TaskStatus.DONE),
        make_task(id="b"),
        make_task(id="c", status=TaskStatus.DOING),
        make_task(id="d"),
    ]

    groups = group_by_status(tasks)

    assert [t.id for t in groups[TaskStatus.TODO]] == ["b", "d"]
    assert [t.id for t in groups[TaskStatus.DOING]] == ["c"]
    assert [t.id for t in groups[TaskStatus.DONE]] == ["a"]


def test_group_by_status_has_every_column():
    assert set(group_by_status([])) == set(TaskStatus)
