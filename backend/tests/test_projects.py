import pytest
from datetime import date
from httpx import AsyncClient

from teamflow.models.project import Project, ProjectStatus
from teamflow.models.task import Task, TaskPriority


@pytest.fixture
async def project(db_session, team) -> Project:
    """A hand-made project with one task and no details block"""
    project = Project(
        team_id=team.id,
        name="Website relaunch",
        status=ProjectStatus.ACTIVE,
        start_date=date(2024, 5, 1),
        due_date=date(2024, 6, 1),
    )
    db_session.add(project)
    await db_session.flush()
    db_session.add(Task(project_id=project.id, title="Wireframes", priority=TaskPriority.LOW))
    await db_session.commit()
    return project


@pytest.mark.asyncio
async def test_get_project(client: AsyncClient, auth_headers, project):
    response = await client.get(f"/api/v1/projects/{project.id}", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Website relaunch"
    assert data["status"] == "active"
    assert data["details"] is None
    assert data["task_count"] == 1
    assert data["tasks"][0]["priority"] == "low"
    assert data["tasks"][0]["status"] == "todo"
    assert len(data["uuid"]) == 36


@pytest.mark.asyncio
async def test_get_project_not_found(client: AsyncClient, auth_headers):
    response = await client.get("/api/v1/projects/9999", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "PROJECT_NOT_FOUND"


@pytest.mark.asyncio
async def test_get_project_outside_team(client: AsyncClient, outsider_auth_headers, project):
    response = await client.get(f"/api/v1/projects/{project.id}", headers=outsider_auth_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_get_project_requires_auth(client: AsyncClient, project):
    response = await client.get(f"/api/v1/projects/{project.id}")

    assert response.status_code in (401, 403)
