"""End-to-end tests for the user endpoints."""

from uuid import UUID

from tests.integration.api.conftest import login_headers, register
from tests.shared.fixtures.factories import UserFactory


class TestRegisterAndLogin:
    async def test_registered_user_can_be_fetched(self, client, users_url, alice):
        user_id, headers = alice

        response = await client.get(f"{users_url}/{user_id}", headers=headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert UUID(data["id"]) == UUID(user_id)
        assert data["email"] == UserFactory.ALICE_EMAIL
        assert data["first_name"] == "Alice"
        assert data["last_name"] == "Liddell"
        assert "password" not in data
        assert "password_hash" not in data

    async def test_duplicate_email_is_rejected(self, client, users_url, alice):
        response = await client.post(
            f"{users_url}/register",
            json=UserFactory.alice_payload(),
        )

        assert response.status_code == 400
        assert response.json()["code"] == "EMAIL_ALREADY_EXISTS"

    async def test_wrong_password_is_rejected(self, client, users_url, alice):
        response = await client.post(
            f"{users_url}/login",
            json={"email": UserFactory.ALICE_EMAIL, "password": "not-the-password"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    async def test_unknown_email_is_rejected_the_same_way(self, client, users_url):
        response = await client.post(
            f"{users_url}/login",
            json={"email": "ghost@example.com", "password": UserFactory.PASSWORD},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid email or password"

    async def test_login_email_is_case_insensitive(self, client, users_url, alice):
        response = await client.post(
            f"{users_url}/login",
            json={"email": "ALICE@example.com", "password": UserFactory.PASSWORD},
        )

        assert response.status_code == 200

    async def test_multibyte_password_over_72_bytes_is_rejected(
        self,
        client,
        users_url,
    ):
        # 40 characters pass the schema, 80 bytes exceed what bcrypt hashes
        payload = UserFactory.alice_payload() | {"password": "é" * 40}

        response = await client.post(f"{users_url}/register", json=payload)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        assert "72 bytes" in response.json()["detail"]

    async def test_multibyte_password_of_72_bytes_can_log_in(
        self,
        client,
        users_url,
    ):
        payload = UserFactory.bob_payload() | {"password": "é" * 36}

        await register(client, users_url, payload)

        await login_headers(client, users_url, payload)


class TestListUsers:
    async def test_lists_every_user(self, client, users_url, alice):
        _, headers = alice
        bob_id = await register(client, users_url, UserFactory.bob_payload())

        response = await client.get(users_url, headers=headers)

        assert response.status_code == 200
        ids = {u["id"] for u in response.json()["data"]}
        assert ids == {alice[0], bob_id}

    async def test_requires_authentication(self, client, users_url):
        response = await client.get(users_url)

        assert response.status_code == 401


class TestUpdateUser:
    async def test_partial_update_round_trip(self, client, users_url, alice):
        user_id, headers = alice

        response = await client.patch(
            f"{users_url}/{user_id}",
            json={"first_name": "Alicia"},
            headers=headers,
        )
        assert response.status_code == 200
        assert response.json() == {"data": True}

        data = (await client.get(f"{users_url}/{user_id}", headers=headers)).json()[
            "data"
        ]
        assert data["first_name"] == "Alicia"
        assert data["last_name"] == "Liddell"
        assert data["email"] == UserFactory.ALICE_EMAIL

    async def test_password_change_takes_effect(self, client, users_url, alice):
        user_id, headers = alice

        response = await client.patch(
            f"{users_url}/{user_id}",
            json={"password": "AnotherPassword789"},
            headers=headers,
        )
        assert response.status_code == 200

        old = await client.post(
            f"{users_url}/login",
            json={"email": UserFactory.ALICE_EMAIL, "password": UserFactory.PASSWORD},
        )
        assert old.status_code == 400
        await login_headers(
            client,
            users_url,
            {"email": UserFactory.ALICE_EMAIL, "password": "AnotherPassword789"},
        )

    async def test_multibyte_password_over_72_bytes_is_rejected(
        self,
        client,
        users_url,
        alice,
    ):
        user_id, headers = alice

        response = await client.patch(
            f"{users_url}/{user_id}",
            json={"password": "ü" * 40},
            headers=headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        # Old password still works
        await login_headers(client, users_url, UserFactory.alice_payload())

    async def test_cannot_update_someone_else(self, client, users_url, alice):
        _, headers = alice
        bob_id = await register(client, users_url, UserFactory.bob_payload())

        response = await client.patch(
            f"{users_url}/{bob_id}",
            json={"first_name": "Mallory"},
            headers=headers,
        )

        assert response.status_code == 401
        bob = (await client.get(f"{users_url}/{bob_id}", headers=headers)).json()[
            "data"
        ]
        assert bob["first_name"] == "Bob"


class TestDeleteUser:
    async def test_deleted_user_is_gone(self, client, users_url, alice):
        _, headers = alice
        bob_id = await register(client, users_url, UserFactory.bob_payload())

        response = await client.delete(f"{users_url}/{bob_id}", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"data": True}

        response = await client.get(f"{users_url}/{bob_id}", headers=headers)
        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    async def test_deleting_twice_is_404(self, client, users_url, alice):
        user_id, headers = alice

        assert (
            await client.delete(f"{users_url}/{user_id}", headers=headers)
        ).status_code == 200
        assert (
            await client.delete(f"{users_url}/{user_id}", headers=headers)
        ).status_code == 404
