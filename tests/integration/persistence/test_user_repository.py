"""Integration tests for UserRepositorySQLAlchemy with SQLite."""

from uuid import UUID, uuid4

import pytest

from todo.domain.shared.exceptions import DatabaseError, ValidationError
from todo.domain.user import EmailAlreadyExistsError, User, UserNotFoundError
from todo.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

TEST_EMAIL = "test@example.com"


@pytest.fixture
def user_repo(sqlite_session):
    """Create UserRepository instance."""
    return UserRepositorySQLAlchemy(sqlite_session)


def _user(email: str = TEST_EMAIL, **kwargs) -> User:
    return User.create(email=email, password_hash="$2b$04$hash", **kwargs)


class TestSaveAndGet:
    async def test_save_and_get_by_id(self, user_repo):
        user = _user(first_name="Ada", last_name="Lovelace")

        await user_repo.save(user)
        found = await user_repo.get_by_id(user.id)

        assert isinstance(found.id, UUID)
        assert found.id == user.id
        assert found.email == TEST_EMAIL
        assert found.first_name == "Ada"
        assert found.last_name == "Lovelace"
        assert found.password_hash == "$2b$04$hash"
        assert found.created_at.tzinfo is not None

    async def test_get_by_id_not_found(self, user_repo):
        with pytest.raises(UserNotFoundError):
            await user_repo.get_by_id(uuid4())

    async def test_duplicate_email_raises(self, user_repo):
        await user_repo.save(_user())

        with pytest.raises(EmailAlreadyExistsError):
            await user_repo.save(_user())

    async def test_duplicate_email_differs_only_in_case(self, user_repo):
        await user_repo.save(_user())

        with pytest.raises(EmailAlreadyExistsError):
            await user_repo.save(_user("TEST@example.com"))


class TestGetUser:
    async def test_by_email(self, user_repo):
        user = _user()
        await user_repo.save(user)

        found = await user_repo.get_user({"email": TEST_EMAIL})

        assert found.id == user.id

    async def test_email_condition_is_normalized(self, user_repo):
        user = _user()
        await user_repo.save(user)

        found = await user_repo.get_user({"email": " Test@Example.com "})

        assert found.id == user.id

    async def test_multiple_conditions(self, user_repo):
        await user_repo.save(_user("a@example.com", first_name="Ada"))
        grace = _user("g@example.com", first_name="Grace")
        await user_repo.save(grace)

        found = await user_repo.get_user({"first_name": "Grace", "email": "g@example.com"})

        assert found.id == grace.id

    async def test_no_match_raises_not_found(self, user_repo):
        with pytest.raises(UserNotFoundError):
            await user_repo.get_user({"email": "nobody@example.com"})

    async def test_unknown_field_raises_database_error(self, user_repo):
        with pytest.raises(DatabaseError, match="Unknown user fields: nickname"):
            await user_repo.get_user({"nickname": "ada"})


class TestGetAll:
    async def test_empty_table_returns_empty_list(self, user_repo):
        assert await user_repo.get_all() == []

    async def test_returns_every_user(self, user_repo):
        a = _user("a@example.com")
        b = _user("b@example.com")
        await user_repo.save(a)
        await user_repo.save(b)

        users = await user_repo.get_all()

        assert {u.id for u in users} == {a.id, b.id}


class TestUpdate:
    async def test_partial_update_leaves_other_fields(self, user_repo):
        user = _user(first_name="Ada", last_name="Lovelace")
        await user_repo.save(user)

        await user_repo.update(user.id, {"first_name": "Augusta"})
        found = await user_repo.get_by_id(user.id)

        assert found.first_name == "Augusta"
        assert found.last_name == "Lovelace"
        assert found.email == TEST_EMAIL
        assert found.created_at == user.created_at
        assert found.updated_at >= user.updated_at

    async def test_update_missing_user_raises(self, user_repo):
        with pytest.raises(UserNotFoundError):
            await user_repo.update(uuid4(), {"first_name": "Nobody"})

    async def test_empty_update_on_missing_user_raises(self, user_repo):
        with pytest.raises(UserNotFoundError):
            await user_repo.update(uuid4(), {})

    async def test_empty_update_is_noop(self, user_repo):
        user = _user(first_name="Ada")
        await user_repo.save(user)

        await user_repo.update(user.id, {})

        assert (await user_repo.get_by_id(user.id)).first_name == "Ada"

    async def test_id_cannot_be_changed(self, user_repo):
        user = _user()
        await user_repo.save(user)

        with pytest.raises(ValidationError, match="immutable"):
            await user_repo.update(user.id, {"id": uuid4()})

    async def test_unknown_field_raises_database_error(self, user_repo):
        user = _user()
        await user_repo.save(user)

        with pytest.raises(DatabaseError):
            await user_repo.update(user.id, {"nickname": "ada"})


class TestDelete:
    async def test_delete_removes_user(self, user_repo):
        user = _user()
        await user_repo.save(user)

        await user_repo.delete(user.id)

        with pytest.raises(UserNotFoundError):
            await user_repo.get_by_id(user.id)

    async def test_delete_missing_user_raises(self, user_repo):
        with pytest.raises(UserNotFoundError):
            await user_repo.delete(uuid4())

    async def test_delete_keeps_other_users(self, user_repo):
        a = _user("a@example.com")
        b = _user("b@example.com")
        await user_repo.save(a)
        await user_repo.save(b)

        await user_repo.delete(a.id)

        assert [u.id for u in await user_repo.get_all()] == [b.id]
