"""Shared fixtures for the Pulse test-suite."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# ``main`` builds a default application at import time.
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault(
    "DATABASE_URL", f"sqlite:///{Path(tempfile.gettempdir()) / 'pulse_import_test.db'}"
)

from pulse.config import Settings  # noqa: E402
from pulse.container import Container  # noqa: E402
from pulse.domain.entities import User  # noqa: E402
from pulse.infrastructure.database import initialize_database  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a fresh SQLite file for every test."""

    return Settings(
        secret_key="test-secret",
        database_url=f"sqlite:///{tmp_path / 'pulse.db'}",
        password_hash_rounds=1_000,
        log_level="WARNING",
    )


@pytest.fixture
def container(settings: Settings):
    """Wired components with the schema created, without an HTTP app."""

    container = Container.build(settings)
    initialize_database(container.engine)
    yield container
    container.engine.dispose()


@pytest.fixture
def client(settings: Settings):
    """Return a test client bound to a clean application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def make_user(container: Container):
    """Insert a user directly through the store and return it."""

    async def _make_user(name: str = "Ada", email: str | None = None) -> User:
        return await container.users.create(
            User(
                id=None,
                name=name,
                email=email or f"{name.lower()}@example.com",
                password=container.passwords.hash("Secret123"),
            )
        )

    return _make_user
