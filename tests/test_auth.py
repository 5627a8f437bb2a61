import inspect
from datetime import timedelta

import pytest

from staffgap.core.security import create_access_token, decode_token


def test_token_round_trip_carries_subject():
    token = create_access_token(subject=7, data={"role": "HOD"})
    payload = decode_token(token)
    assert payload["sub"] == "7"
    assert payload["role"] == "HOD"


@pytest.mark.asyncio
async def test_login_returns_token_and_user(client):
    res = await client.post("/api/auth/login", json={"username": "dean", "password": "whatever"})
    assert res.status_code == 200

    body = res.json()
    assert body["token_type"] == "bearer"
    assert body["user"]["role"] == "DEAN"
    assert body["user"]["faculty_id"] == 1
    assert "password" not in body["user"]


@pytest.mark.asyncio
async def test_login_unknown_user(client):
    res = await client.post("/api/auth/login", json={"username": "ghost", "password": "password"})
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_me_requires_token(client):
    res = await client.get("/api/auth/me")
    assert res.status_code in (401, 403)


@pytest.mark.asyncio
async def test_me(client, hod_headers):
    res = await client.get("/api/auth/me", headers=hod_headers)
    assert res.status_code == 200
    assert res.json()["department_id"] == 101


@pytest.mark.asyncio
async def test_expired_token_is_rejected(client):
    token = create_access_token(subject=1, expires_delta=timedelta(minutes=-5))
    res = await client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_deleted_user_loses_session(client, portal, hod_headers):
    portal.identity.delete_user(101)
    res = await client.get("/api/auth/me", headers=hod_headers)
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_logout_clears_session_copy(client, portal, hod_headers):
    assert portal.identity.current_user.id == 101
    res = await client.post("/api/auth/logout", headers=hod_headers)
    assert res.status_code == 200
    assert portal.identity.current_user is None


@pytest.mark.asyncio
async def test_health(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_auth_dependencies_are_coroutines():
    from staffgap.api.deps import get_current_user, get_portal, require_admin
    from staffgap.core.rbac import AllowRoles, RequireFeature

    for dependency in (get_portal, get_current_user, require_admin, AllowRoles("HOD"), RequireFeature("dashboard")):
        assert inspect.iscoroutinefunction(dependency)
