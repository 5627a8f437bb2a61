import pytest


@pytest.mark.asyncio
async def test_admin_lists_every_user(client, admin_headers):
    res = await client.get("/api/users/", headers=admin_headers)
    assert res.status_code == 200
    assert len(res.json()) == 18


@pytest.mark.asyncio
async def test_dean_lists_only_own_faculty_hods(client, dean_headers):
    res = await client.get("/api/users/", headers=dean_headers)
    assert res.status_code == 200
    users = res.json()
    assert len(users) == 8
    assert {u["role"] for u in users} == {"HOD"}


@pytest.mark.asyncio
async def test_hod_cannot_list_users(client, hod_headers):
    res = await client.get("/api/users/", headers=hod_headers)
    assert res.status_code == 403
    assert res.json()["detail"] == "Access denied for role 'HOD'"


@pytest.mark.asyncio
async def test_admin_registers_hod(client, portal, admin_headers):
    portal.identity.delete_user(106)
    payload = {"name": "Dr. John Doe", "username": "hod.soc2", "password": "pw", "department_id": 106}
    res = await client.post("/api/users/hods", json=payload, headers=admin_headers)
    assert res.status_code == 201
    assert res.json() == {"success": True, "message": "HOD registered successfully!"}

    assert portal.identity.find_hod(106).username == "hod.soc2"
    assert portal.audit.recent(limit=1)[0].action == "CREATE_USER"


@pytest.mark.asyncio
async def test_duplicate_username_is_a_400(client, admin_headers):
    payload = {"name": "X", "username": "hod", "password": "pw", "department_id": 106}
    res = await client.post("/api/users/hods", json=payload, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["detail"] == "Username (email) already exists."


@pytest.mark.asyncio
async def test_dean_registers_hod_only_in_own_faculty(client, portal, dean_headers):
    portal.identity.delete_user(106)
    ok = {"name": "Dr. New", "username": "hod.new", "password": "pw", "department_id": 106}
    res = await client.post("/api/users/hods", json=ok, headers=dean_headers)
    assert res.status_code == 201

    other = {"name": "Dr. Other", "username": "hod.other", "password": "pw", "department_id": 201}
    res = await client.post("/api/users/hods", json=other, headers=dean_headers)
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_register_hod_for_unknown_department(client, admin_headers):
    payload = {"name": "X", "username": "x", "password": "pw", "department_id": 999}
    res = await client.post("/api/users/hods", json=payload, headers=admin_headers)
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_only_admin_registers_deans(client, portal, admin_headers, dean_headers):
    payload = {"name": "Prof. Arts", "username": "dean.arts", "password": "pw", "faculty_id": 2}
    res = await client.post("/api/users/deans", json=payload, headers=dean_headers)
    assert res.status_code == 403

    res = await client.post("/api/users/deans", json=payload, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["detail"] == "That faculty already has a Dean assigned."

    portal.identity.delete_user(3)
    res = await client.post("/api/users/deans", json=payload, headers=admin_headers)
    assert res.status_code == 201


@pytest.mark.asyncio
async def test_delete_and_restore_user(client, portal, admin_headers):
    res = await client.delete("/api/users/102", headers=admin_headers)
    assert res.status_code == 200
    assert portal.identity.get_user(102).is_deleted is True

    res = await client.post("/api/users/102/restore", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["is_deleted"] is False

    assert (await client.delete("/api/users/999", headers=admin_headers)).status_code == 404
    assert (await client.delete("/api/users/1", headers=admin_headers)).status_code == 400
