"""Fixtures shared by the integration tests.

Repository and API tests run against a fresh in-memory SQLite database.
The PostgreSQL fixtures are only started by tests marked
@pytest.mark.integration.
"""

# Re-export shared fixtures from database.py
from tests.shared.fixtures.database import (
    async_engine,
    db_session,
    postgres_container,
    sqlite_engine,
    sqlite_session,
    sqlite_session_maker,
)

# Make fixtures available to tests in this directory
__all__ = [
    "async_engine",
    "db_session",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
    "sqlite_session_maker",
]
