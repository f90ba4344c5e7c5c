"""Test configuration for repo-root tests."""

import sys
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.main import create_app  # noqa: E402
from todo_api.repositories.todo_repository import InMemoryTodoRepository  # noqa: E402
from todo_api.settings import Settings  # noqa: E402


def make_settings(**overrides) -> Settings:
    values = dict(
        database_url=None,
        db_user="postgres",
        db_host="localhost",
        db_name="todo",
        db_password="",
        db_port=5432,
        db_pool_min_size=1,
        db_pool_max_size=5,
        db_command_timeout=10.0,
        db_create_schema=True,
        storage_backend="memory",
        allowed_origins=["*"],
        host="127.0.0.1",
        port=5000,
        log_level="INFO",
        environment="test",
        reload=False,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(name="make_settings")
def make_settings_fixture():
    """Factory for Settings with test defaults and per-test overrides."""
    return make_settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def repository() -> InMemoryTodoRepository:
    """Fresh in-memory storage for each test."""
    return InMemoryTodoRepository()


@pytest.fixture
def client(settings: Settings, repository: InMemoryTodoRepository) -> Iterator[TestClient]:
    """Provide a TestClient whose app stores todos in ``repository``."""
    app = create_app(settings=settings, repository=repository)
    with TestClient(app) as test_client:
        yield test_client
