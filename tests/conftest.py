from datetime import datetime, timezone

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from staffgap.core.portal import init_portal
from staffgap.core.seeding_logic import build_demo_seed
from staffgap.main import app

# Fixed clock for the demo seed so submission ages are deterministic
SEED_NOW = datetime(2024, 11, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def portal():
    """A fresh, fully seeded portal per test."""
    return init_portal(build_demo_seed(now=SEED_NOW))


@pytest.fixture
def empty_portal():
    return init_portal()


@pytest_asyncio.fixture
async def client(portal):
    """
    httpx >= 0.27 client over ASGITransport.
    ASGITransport does not run startup events, so the portal is attached here.
    """
    app.state.portal = portal
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


async def login_headers(client, username: str, password: str = "password") -> dict:
    res = await client.post("/api/auth/login", json={"username": username, "password": password})
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['access_token']}"}


@pytest.fixture
def login(client):
    """Log a seeded user in and return their auth headers."""

    async def _login(username: str, password: str = "password") -> dict:
        return await login_headers(client, username, password)

    return _login


@pytest_asyncio.fixture
async def admin_headers(client):
    return await login_headers(client, "admin")


@pytest_asyncio.fixture
async def dean_headers(client):
    # Dean of Faculty of Management (id 1)
    return await login_headers(client, "dean")


@pytest_asyncio.fixture
async def hod_headers(client):
    # HOD of Accounting (department 101)
    return await login_headers(client, "hod")
