import pytest

from staffgap.models.user import UserRole


# ------------------------------------------------------------
# Account
# ------------------------------------------------------------
@pytest.mark.asyncio
async def test_update_own_profile(client, portal, hod_headers):
    res = await client.patch("/api/account/profile", json={"phone": "08099999999"}, headers=hod_headers)
    assert res.status_code == 200
    assert res.json()["phone"] == "08099999999"
    assert res.json()["name"] == "Dr. Bala Mohammed"
    assert portal.identity.current_user.phone == "08099999999"


@pytest.mark.asyncio
async def test_change_password(client, portal, hod_headers):
    res = await client.post(
        "/api/account/change-password",
        json={"old_password": "password", "new_password": "n3w"},
        headers=hod_headers,
    )
    assert res.status_code == 200
    assert portal.identity.get_user(101).password == "n3w"

    res = await client.post(
        "/api/account/change-password",
        json={"old_password": "n3w", "new_password": ""},
        headers=hod_headers,
    )
    assert res.status_code == 400


# ------------------------------------------------------------
# Announcements
# ------------------------------------------------------------
@pytest.mark.asyncio
async def test_announcements(client, admin_headers, hod_headers):
    res = await client.get("/api/announcements/", params={"limit": 2}, headers=hod_headers)
    assert len(res.json()) == 2

    res = await client.post("/api/announcements/", json={"title": "Hi", "content": "There"}, headers=hod_headers)
    assert res.status_code == 403

    res = await client.post("/api/announcements/", json={"title": "Hi", "content": "There"}, headers=admin_headers)
    assert res.status_code == 201
    created = res.json()
    assert created["author_name"] == "Dr. Admin"

    res = await client.get("/api/announcements/", headers=hod_headers)
    assert res.json()[0]["id"] == created["id"]

    assert (await client.delete(f"/api/announcements/{created['id']}", headers=admin_headers)).status_code == 200
    assert (await client.delete(f"/api/announcements/{created['id']}", headers=admin_headers)).status_code == 404


# ------------------------------------------------------------
# Notifications
# ------------------------------------------------------------
@pytest.mark.asyncio
async def test_notifications_are_private(client, hod_headers, dean_headers):
    res = await client.get("/api/notifications/", headers=hod_headers)
    mine = res.json()
    assert len(mine) == 2
    assert all(n["user_id"] == 101 for n in mine)

    dean_notification = (await client.get("/api/notifications/", headers=dean_headers)).json()[0]
    res = await client.post(f"/api/notifications/{dean_notification['id']}/read", headers=hod_headers)
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_mark_notifications_read(client, dean_headers):
    assert (await client.get("/api/notifications/unread-count", headers=dean_headers)).json() == {"unread": 2}

    res = await client.post("/api/notifications/read-all", headers=dean_headers)
    assert res.json() == {"updated": 2}
    assert (await client.get("/api/notifications/unread-count", headers=dean_headers)).json() == {"unread": 0}


# ------------------------------------------------------------
# History logs and support
# ------------------------------------------------------------
@pytest.mark.asyncio
async def test_logs_admin_only(client, admin_headers, dean_headers):
    assert (await client.get("/api/logs/", headers=dean_headers)).status_code == 403

    res = await client.get("/api/logs/", params={"action": "create_user"}, headers=admin_headers)
    assert res.status_code == 200
    assert len(res.json()) == 2


@pytest.mark.asyncio
async def test_support_tickets(client, admin_headers, hod_headers):
    assert (await client.get("/api/support/tickets", headers=hod_headers)).status_code == 403

    res = await client.get("/api/support/tickets", params={"open_only": True}, headers=admin_headers)
    assert len(res.json()) == 3

    res = await client.patch("/api/support/tickets/1", json={"status": "Resolved"}, headers=admin_headers)
    assert res.status_code == 200
    assert res.json()["status"] == "Resolved"

    res = await client.patch("/api/support/tickets/77", json={"status": "Closed"}, headers=admin_headers)
    assert res.status_code == 404


# ------------------------------------------------------------
# Dashboard and metadata
# ------------------------------------------------------------
@pytest.mark.asyncio
async def test_dashboard_per_role(client, hod_headers, dean_headers):
    hod = (await client.get("/api/dashboard/", headers=hod_headers)).json()
    assert hod["scope_department_ids"] == [101]
    assert hod["current_submission"]["department_id"] == 101
    assert hod["pending_reviews"] is None

    dean = (await client.get("/api/dashboard/", headers=dean_headers)).json()
    assert len(dean["scope_department_ids"]) == 8
    assert [s["department_id"] for s in dean["pending_reviews"]] == [102, 107]


@pytest.mark.asyncio
async def test_common_metadata(client):
    ranks = (await client.get("/api/common/ranks")).json()
    assert ranks[0] == "Professor"
    assert len(ranks) == 7

    statuses = (await client.get("/api/common/statuses")).json()
    assert "Needs Correction" in statuses

    features = (await client.get("/api/common/features")).json()
    assert len(features) == 10


@pytest.mark.asyncio
async def test_settings_toggle_blocks_account_changes(client, portal, hod_headers):
    portal.policy.set_permission("settings", UserRole.HOD, False)

    res = await client.patch("/api/account/profile", json={"phone": "0801"}, headers=hod_headers)
    assert res.status_code == 403
    res = await client.post(
        "/api/account/change-password",
        json={"old_password": "password", "new_password": "x"},
        headers=hod_headers,
    )
    assert res.status_code == 403
    assert portal.identity.get_user(101).password == "password"


@pytest.mark.asyncio
async def test_contact_directory(client, portal, hod_headers, admin_headers):
    res = await client.get("/api/support/contacts", headers=hod_headers)
    assert res.status_code == 200
    body = res.json()
    assert body[0]["role"] == "DEAN"
    assert len(body) == 8

    res = await client.get("/api/support/contacts", params={"faculty_id": 2}, headers=admin_headers)
    assert len(res.json()) == 8
    res = await client.get("/api/support/contacts", params={"faculty_id": 9}, headers=admin_headers)
    assert res.status_code == 404

    portal.policy.set_permission("contactDirectory", UserRole.HOD, False)
    res = await client.get("/api/support/contacts", headers=hod_headers)
    assert res.status_code == 403
