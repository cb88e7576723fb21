"""Fixtures for API integration tests.

The full application stack (router, service, repository) runs against a
fresh in-memory SQLite database per test.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from todo.presentation.api.app import API_V1_PREFIX, create_app
from todo.presentation.api.dependencies import get_db_session
from tests.shared.fixtures.factories import UserFactory, make_test_settings


@pytest.fixture
def users_url() -> str:
    return f"{API_V1_PREFIX}/users"


@pytest.fixture
async def client(sqlite_session_maker):
    """HTTP client whose requests share the test database."""
    app = create_app(make_test_settings())

    async def override_get_db_session():
        async with sqlite_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def register(client: AsyncClient, users_url: str, payload: dict) -> str:
    response = await client.post(f"{users_url}/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def login_headers(client: AsyncClient, users_url: str, payload: dict) -> dict:
    response = await client.post(
        f"{users_url}/login",
        json={"email": payload["email"], "password": payload["password"]},
    )
    assert response.status_code == 200, response.text
    token = response.json()["data"]["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def alice(client, users_url) -> tuple[str, dict]:
    """Registered and logged-in Alice: (user id, auth headers)."""
    payload = UserFactory.alice_payload()
    user_id = await register(client, users_url, payload)
    return user_id, await login_headers(client, users_url, payload)
