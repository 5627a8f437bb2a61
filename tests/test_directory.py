import pytest


@pytest.mark.asyncio
async def test_list_faculties_and_departments(client, hod_headers):
    res = await client.get("/api/faculties", headers=hod_headers)
    assert [f["name"] for f in res.json()] == ["Faculty of Management", "Faculty of Science"]

    res = await client.get("/api/departments", params={"faculty_id": 2}, headers=hod_headers)
    assert len(res.json()) == 7


@pytest.mark.asyncio
async def test_admin_adds_faculty(client, portal, admin_headers):
    res = await client.post("/api/faculties", json={"name": " Faculty of Arts "}, headers=admin_headers)
    assert res.status_code == 201
    assert portal.directory.faculties[-1].name == "Faculty of Arts"

    res = await client.post("/api/faculties", json={"name": "faculty of arts"}, headers=admin_headers)
    assert res.status_code == 400
    assert res.json()["detail"] == "A faculty with this name already exists."


@pytest.mark.asyncio
async def test_dean_cannot_add_faculty(client, dean_headers):
    res = await client.post("/api/faculties", json={"name": "Faculty of Law"}, headers=dean_headers)
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_dean_adds_department_to_own_faculty_only(client, dean_headers):
    res = await client.post("/api/departments", json={"name": "History", "faculty_id": 1}, headers=dean_headers)
    assert res.status_code == 201

    res = await client.post("/api/departments", json={"name": "Geology", "faculty_id": 2}, headers=dean_headers)
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_dean_loses_structure_rights_when_disabled(client, portal, dean_headers):
    portal.policy.set_permission("manageStructure", portal.identity.get_user(2).role, False)
    res = await client.post("/api/departments", json={"name": "History", "faculty_id": 1}, headers=dean_headers)
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_delete_faculty_cascades_and_restore(client, portal, admin_headers):
    res = await client.delete("/api/faculties/2", headers=admin_headers)
    assert res.status_code == 200
    assert all(d.is_deleted for d in portal.directory.list_departments(faculty_id=2, include_deleted=True))

    res = await client.get("/api/departments", params={"faculty_id": 2}, headers=admin_headers)
    assert res.json() == []

    res = await client.post("/api/faculties/2/restore", headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["is_deleted"] is False
    assert len(portal.directory.list_departments(faculty_id=2)) == 7


@pytest.mark.asyncio
async def test_unknown_ids_are_404(client, admin_headers):
    assert (await client.delete("/api/faculties/99", headers=admin_headers)).status_code == 404
    assert (await client.post("/api/departments/999/restore", headers=admin_headers)).status_code == 404
    res = await client.post("/api/departments", json={"name": "X", "faculty_id": 99}, headers=admin_headers)
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_delete_department(client, portal, admin_headers):
    res = await client.delete("/api/departments/104", headers=admin_headers)
    assert res.status_code == 200
    assert portal.directory.get_department(104).is_deleted is True
    assert portal.directory.get_faculty(1).is_deleted is False
