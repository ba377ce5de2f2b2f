"""
Pytest configuration for integration tests.

Persistence tests run against a temp-file SQLite database by default;
tests marked ``@pytest.mark.integration`` use Testcontainers PostgreSQL.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    db_session,
    postgres_container,
    postgres_engine,
    postgres_session,
    sqlite_engine,
)

__all__ = [
    "db_session",
    "postgres_container",
    "postgres_engine",
    "postgres_session",
    "sqlite_engine",
]
