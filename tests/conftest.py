# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from todo_service.app import create_app
from todo_service.config import Settings
from todo_service.repository import DatabaseTodoRepository, InMemoryTodoRepository, TodoRepository


@pytest.fixture()
def memory_repo() -> InMemoryTodoRepository:
    return InMemoryTodoRepository()


@pytest.fixture()
def db_repo(tmp_path: Path):
    """Database backend on a throwaway SQLite file."""
    repo = DatabaseTodoRepository.from_url(f"sqlite:///{tmp_path / 'todos.sqlite3'}")
    repo.create_tables()
    yield repo
    repo.dispose()


@pytest.fixture(params=["memory", "database"])
def repository(request: pytest.FixtureRequest) -> TodoRepository:
    """Runs the contract tests once per backend."""
    if request.param == "memory":
        return request.getfixturevalue("memory_repo")
    return request.getfixturevalue("db_repo")


@pytest.fixture()
def settings() -> Settings:
    return Settings(TODO_BACKEND="memory", API_PREFIX="")


@pytest.fixture()
def client(settings: Settings, repository: TodoRepository):
    app = create_app(settings, repository=repository)
    with TestClient(app) as test_client:
        yield test_client
