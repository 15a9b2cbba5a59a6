# tests/test_memory_repository.py

from __future__ import annotations

import asyncio
import dataclasses
import threading

import pytest

from todo_service.models import Todo, TodoCreate, TodoUpdate
from todo_service.repository import InMemoryTodoRepository


@pytest.mark.asyncio
async def test_returned_todos_cannot_alias_internal_state(memory_repo: InMemoryTodoRepository) -> None:
    todo = await memory_repo.create(TodoCreate(text="immutable"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        todo.text = "changed"  # type: ignore[misc]

    assert (await memory_repo.find(todo.id)).text == "immutable"


@pytest.mark.asyncio
async def test_initial_items_seed_the_id_counter() -> None:
    repo = InMemoryTodoRepository(
        initial_items=[Todo(id=3, text="seeded"), Todo(id=7, text="seeded too", completed=True)]
    )

    created = await repo.create(TodoCreate(text="next"))

    assert created.id == 8
    assert len(repo) == 3
    assert (await repo.find(7)).completed is True


@pytest.mark.asyncio
async def test_clear_does_not_rewind_ids(memory_repo: InMemoryTodoRepository) -> None:
    await memory_repo.create(TodoCreate(text="one"))
    await memory_repo.create(TodoCreate(text="two"))

    memory_repo.clear()
    created = await memory_repo.create(TodoCreate(text="three"))

    assert len(memory_repo) == 1
    assert created.id == 3


def test_concurrent_creates_from_threads_get_unique_ids(memory_repo: InMemoryTodoRepository) -> None:
    per_thread = 50
    results: list[list[int]] = []
    results_lock = threading.Lock()

    def worker(n: int) -> None:
        async def run() -> list[int]:
            ids = []
            for i in range(per_thread):
                todo = await memory_repo.create(TodoCreate(text=f"t{n}-{i}"))
                ids.append(todo.id)
            return ids

        ids = asyncio.run(run())
        with results_lock:
            results.append(ids)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    all_ids = [i for ids in results for i in ids]
    assert len(all_ids) == 8 * per_thread
    assert len(set(all_ids)) == len(all_ids)
    assert len(memory_repo) == len(all_ids)


def test_concurrent_updates_are_atomic(memory_repo: InMemoryTodoRepository) -> None:
    asyncio.run(memory_repo.create(TodoCreate(text="shared")))

    def worker(n: int) -> None:
        async def run() -> None:
            for _ in range(100):
                await memory_repo.update(1, TodoUpdate(text=f"writer {n}", completed=n % 2 == 0))

        asyncio.run(run())

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=10)

    final = asyncio.run(memory_repo.find(1))
    # text and completed always come from the same writer
    writer = int(final.text.split()[-1])
    assert final.completed is (writer % 2 == 0)


@pytest.mark.asyncio
async def test_many_coroutines_share_one_repository(memory_repo: InMemoryTodoRepository) -> None:
    created = await asyncio.gather(*(memory_repo.create(TodoCreate(text=f"c{i}")) for i in range(20)))
    await asyncio.gather(*(memory_repo.delete(todo.id) for todo in created[:5]))

    assert len(await memory_repo.list()) == 15
