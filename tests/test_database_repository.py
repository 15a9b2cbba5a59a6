# tests/test_database_repository.py

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import text

from todo_service.exceptions import TodoNotFoundException, UnexpectedStoreException
from todo_service.models import Todo, TodoCreate, TodoUpdate
from todo_service.repository import DatabaseTodoRepository


@pytest.mark.asyncio
async def test_list_is_ordered_newest_first(db_repo: DatabaseTodoRepository) -> None:
    for name in ("first", "second", "third"):
        await db_repo.create(TodoCreate(text=name))

    todos = await db_repo.list()

    assert [todo.id for todo in todos] == [3, 2, 1]
    assert [todo.text for todo in todos] == ["third", "second", "first"]


@pytest.mark.asyncio
async def test_data_survives_a_new_repository_instance(tmp_path: Path) -> None:
    url = f"sqlite:///{tmp_path / 'persist.sqlite3'}"
    repo = DatabaseTodoRepository.from_url(url)
    repo.create_tables()
    created = await repo.create(TodoCreate(text="persisted"))
    repo.dispose()

    reopened = DatabaseTodoRepository.from_url(url)
    reopened.create_tables()
    try:
        assert await reopened.find(created.id) == created
    finally:
        reopened.dispose()


@pytest.mark.asyncio
async def test_update_of_row_deleted_after_lookup_raises_not_found(
    db_repo: DatabaseTodoRepository, monkeypatch: pytest.MonkeyPatch
) -> None:
    await db_repo.create(TodoCreate(text="racy"))

    async def stale_find(todo_id: int) -> Todo:
        # lookup succeeds, but the row is gone before the write
        await DatabaseTodoRepository.delete(db_repo, todo_id)
        return Todo(id=todo_id, text="racy", completed=False)

    monkeypatch.setattr(db_repo, "find", stale_find)

    with pytest.raises(TodoNotFoundException):
        await db_repo.update(1, TodoUpdate(text="late", completed=True))


@pytest.mark.asyncio
async def test_driver_errors_become_unexpected_store_errors(db_repo: DatabaseTodoRepository) -> None:
    with db_repo.engine.begin() as conn:
        conn.execute(text("DROP TABLE todos"))

    with pytest.raises(UnexpectedStoreException) as exc_info:
        await db_repo.find(1)

    assert exc_info.value.status_code == 500
    assert exc_info.value.details["operation"] == "find"
    assert exc_info.value.__cause__ is not None


@pytest.mark.asyncio
async def test_create_tables_is_idempotent(db_repo: DatabaseTodoRepository) -> None:
    await db_repo.create(TodoCreate(text="kept"))

    db_repo.create_tables()

    assert len(await db_repo.list()) == 1


@pytest.mark.asyncio
async def test_in_memory_sqlite_url_is_supported() -> None:
    repo = DatabaseTodoRepository.from_url("sqlite://")
    repo.create_tables()
    try:
        created = await repo.create(TodoCreate(text="ephemeral"))
        assert await repo.list() == [created]
    finally:
        repo.dispose()


@pytest.mark.asyncio
async def test_unbindable_parameters_become_unexpected_store_errors(db_repo: DatabaseTodoRepository) -> None:
    with pytest.raises(UnexpectedStoreException) as exc_info:
        db_repo._update(Todo(id=2 ** 64, text="huge", completed=False))

    assert exc_info.value.details["operation"] == "update"
    assert isinstance(exc_info.value.__cause__, OverflowError)
