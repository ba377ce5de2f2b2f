"""Project-wide pytest setup.

Layout::

    tests/
    ├── discipline/            habits, checks, streaks, HTTP API, CLI
    ├── discipline_identity/   accounts, passwords, tokens, auth gate
    └── shared/                fixtures used by both

Each package splits into ``unit/`` (in-memory stores) and ``integration/``
(SQLite, always run). Tests marked ``integration`` start a PostgreSQL
container and only run on request: pass ``--run-integration`` or set
``RUN_INTEGRATION=1``. ``--run-all`` / ``RUN_ALL_TESTS=1`` lifts every skip.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from discipline_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Only the test env file is honoured here, never the development one
TEST_ENV_FILE = PROJECT_ROOT / "config" / ".env.test"
if TEST_ENV_FILE.exists():
    load_dotenv(TEST_ENV_FILE)

os.environ.setdefault("JWT_SECRET_KEY", "test-jwt-secret-for-testing-only")

_TRUTHY = frozenset({"1", "true", "yes"})


def _flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in _TRUTHY


def pytest_addoption(parser):
    group = parser.getgroup("discipline")
    group.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="also run tests that need a PostgreSQL container",
    )
    group.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="run every collected test, skipping nothing",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: needs Docker for a PostgreSQL container; skipped by default",
    )


def _containers_requested(config) -> bool:
    return (
        config.getoption("--run-all")
        or config.getoption("--run-integration")
        or _flag("RUN_ALL_TESTS")
        or _flag("RUN_INTEGRATION")
    )


def pytest_collection_modifyitems(config, items):
    if _containers_requested(config):
        return

    skip = pytest.mark.skip(
        reason="needs PostgreSQL; use --run-integration or RUN_INTEGRATION=1",
    )
    for item in items:
        if item.get_closest_marker("integration") is not None:
            item.add_marker(skip)


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    """Every test starts and ends without cached settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
