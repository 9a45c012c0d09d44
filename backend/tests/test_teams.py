import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_create_team(client: AsyncClient, auth_headers, test_user):
    """Creator becomes the team leader"""
    response = await client.post(
        "/api/v1/teams",
        json={"name": "Growth Squad", "description": "SEO and content"},
        headers=auth_headers
    )

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Growth Squad"
    assert data["member_count"] == 1
    assert data["members"][0]["user_id"] == test_user.id
    assert data["members"][0]["role"] == "leader"


@pytest.mark.asyncio
async def test_create_team_name_too_short(client: AsyncClient, auth_headers):
    response = await client.post("/api/v1/teams", json={"name": "A"}, headers=auth_headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_list_my_teams(client: AsyncClient, auth_headers, team):
    response = await client.get("/api/v1/teams", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["teams"][0]["id"] == team.id


@pytest.mark.asyncio
async def test_get_team_as_member(client: AsyncClient, auth_headers, team):
    response = await client.get(f"/api/v1/teams/{team.id}", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["name"] == team.name


@pytest.mark.asyncio
async def test_get_team_as_manager(client: AsyncClient, manager_auth_headers, team):
    """Managers can see teams they do not belong to"""
    response = await client.get(f"/api/v1/teams/{team.id}", headers=manager_auth_headers)

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_get_team_not_member(client: AsyncClient, outsider_auth_headers, team):
    response = await client.get(f"/api/v1/teams/{team.id}", headers=outsider_auth_headers)

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "NOT_AUTHORIZED"


@pytest.mark.asyncio
async def test_get_team_not_found(client: AsyncClient, auth_headers):
    response = await client.get("/api/v1/teams/9999", headers=auth_headers)

    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "TEAM_NOT_FOUND"


@pytest.mark.asyncio
async def test_list_team_projects_empty(client: AsyncClient, auth_headers, team):
    response = await client.get(f"/api/v1/teams/{team.id}/projects", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == {"projects": [], "total": 0}
