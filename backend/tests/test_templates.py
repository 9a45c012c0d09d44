import pytest
from httpx import AsyncClient
from sqlalchemy import select, func

from teamflow.models.template import TemplateProject, TemplateTask


@pytest.fixture
async def onboarding_template(client: AsyncClient, admin_auth_headers, onboarding_template_data) -> dict:
    response = await client.post("/api/v1/templates", json=onboarding_template_data, headers=admin_auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_create_template(client: AsyncClient, admin_auth_headers, onboarding_template_data, admin_user):
    """Test template creation with nested definitions"""
    response = await client.post(
        "/api/v1/templates",
        json=onboarding_template_data,
        headers=admin_auth_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Employee Onboarding"
    assert data["created_by"] == admin_user.id
    assert [p["name"] for p in data["projects"]] == ["Onboard {employee}", "Training"]
    assert [t["title"] for t in data["projects"][0]["tasks"]] == ["Laptop setup for {employee}", "Meet {manager}"]
    assert data["projects"][0]["tasks"][0]["priority"] == "high"
    assert data["projects"][0]["tasks"][1]["priority"] == "medium"
    assert data["projects"][0]["details"] is None
    assert data["projects"][1]["details"]["personnel_count"] == 3


@pytest.mark.asyncio
async def test_create_template_requires_admin(client: AsyncClient, manager_auth_headers, onboarding_template_data):
    response = await client.post("/api/v1/templates", json=onboarding_template_data, headers=manager_auth_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_member_cannot_read_templates(client: AsyncClient, auth_headers):
    response = await client.get("/api/v1/templates", headers=auth_headers)

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_create_template_invalid_offsets(client: AsyncClient, admin_auth_headers):
    response = await client.post(
        "/api/v1/templates",
        json={"name": "Broken", "projects": [{"name": "P", "start_day": -2}]},
        headers=admin_auth_headers
    )

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_templates(client: AsyncClient, manager_auth_headers, onboarding_template):
    response = await client.get("/api/v1/templates", headers=manager_auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["templates"][0]["id"] == onboarding_template["id"]
    assert "projects" not in data["templates"][0]


@pytest.mark.asyncio
async def test_get_template(client: AsyncClient, manager_auth_headers, onboarding_template):
    response = await client.get(f"/api/v1/templates/{onboarding_template['id']}", headers=manager_auth_headers)

    assert response.status_code == 200
    assert response.json()["projects"] == onboarding_template["projects"]


@pytest.mark.asyncio
async def test_get_template_not_found(client: AsyncClient, admin_auth_headers):
    response = await client.get("/api/v1/templates/9999", headers=admin_auth_headers)

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "TEMPLATE_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_template_fields_only(client: AsyncClient, admin_auth_headers, onboarding_template):
    """Updating name keeps every definition"""
    response = await client.put(
        f"/api/v1/templates/{onboarding_template['id']}",
        json={"name": "Onboarding v2"},
        headers=admin_auth_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Onboarding v2"
    assert data["description"] == onboarding_template["description"]
    assert len(data["projects"]) == 2


@pytest.mark.asyncio
async def test_update_template_replaces_projects(
    client: AsyncClient, admin_auth_headers, onboarding_template, db_session
):
    response = await client.put(
        f"/api/v1/templates/{onboarding_template['id']}",
        json={"projects": [{"name": "Kickoff with {client}", "tasks": [{"title": "Agenda"}]}]},
        headers=admin_auth_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data["projects"]] == ["Kickoff with {client}"]

    project_count = await db_session.scalar(select(func.count(TemplateProject.id)))
    task_count = await db_session.scalar(select(func.count(TemplateTask.id)))
    assert project_count == 1
    assert task_count == 1


@pytest.mark.asyncio
async def test_update_template_blank_name(client: AsyncClient, admin_auth_headers, onboarding_template):
    response = await client.put(
        f"/api/v1/templates/{onboarding_template['id']}",
        json={"name": "   "},
        headers=admin_auth_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_delete_template(client: AsyncClient, admin_auth_headers, onboarding_template, db_session):
    template_id = onboarding_template["id"]

    response = await client.delete(f"/api/v1/templates/{template_id}", headers=admin_auth_headers)
    assert response.status_code == 204

    response = await client.get(f"/api/v1/templates/{template_id}", headers=admin_auth_headers)
    assert response.status_code == 404

    assert await db_session.scalar(select(func.count(TemplateProject.id))) == 0
    assert await db_session.scalar(select(func.count(TemplateTask.id))) == 0


@pytest.mark.asyncio
async def test_placeholders(client: AsyncClient, manager_auth_headers, onboarding_template):
    response = await client.get(
        f"/api/v1/templates/{onboarding_template['id']}/placeholders",
        headers=manager_auth_headers
    )

    assert response.status_code == 200
    assert response.json() == {
        "template_id": onboarding_template["id"],
        "placeholders": ["employee", "manager"],
    }


@pytest.mark.asyncio
async def test_placeholders_empty_template(client: AsyncClient, admin_auth_headers):
    response = await client.post("/api/v1/templates", json={"name": "Blank"}, headers=admin_auth_headers)
    template_id = response.json()["id"]

    response = await client.get(f"/api/v1/templates/{template_id}/placeholders", headers=admin_auth_headers)

    assert response.status_code == 200
    assert response.json()["placeholders"] == []


@pytest.mark.asyncio
async def test_placeholders_not_found(client: AsyncClient, admin_auth_headers):
    response = await client.get("/api/v1/templates/9999/placeholders", headers=admin_auth_headers)

    assert response.status_code == 404
