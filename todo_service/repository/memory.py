"""
内存待办仓储

单进程内有效，重启后数据丢失。整个字典由一把读写锁保护：
读操作可并发，写操作独占。锁内不做任何 await。
"""

import logging
from typing import Dict, Iterable, List, Optional

from todo_service.exceptions import TodoNotFoundException
from todo_service.models.todo import Todo, TodoCreate, TodoUpdate
from todo_service.repository.base import TodoRepository
from todo_service.utils.locks import ReadWriteLock

logger = logging.getLogger(__name__)


class InMemoryTodoRepository(TodoRepository):
    """基于字典的待办仓储"""

    def __init__(self, initial_items: Optional[Iterable[Todo]] = None):
        self._items: Dict[int, Todo] = {}
        # 单调递增，删除后 id 不会被复用
        self._next_id = 1
        self._lock = ReadWriteLock()
        if initial_items:
            for item in initial_items:
                self._items[item.id] = item
                self._next_id = max(self._next_id, item.id + 1)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._items)

    async def create(self, payload: TodoCreate) -> Todo:
        with self._lock.write_locked():
            todo = Todo(id=self._next_id, text=payload.text, completed=False)
            self._items[todo.id] = todo
            self._next_id += 1
        logger.debug(f"Todo created in memory: {todo.id}")
        return todo

    async def find(self, todo_id: int) -> Todo:
        with self._lock.read_locked():
            todo = self._items.get(todo_id)
        if todo is None:
            raise TodoNotFoundException(todo_id)
        return todo

    async def list(self) -> List[Todo]:
        with self._lock.read_locked():
            return list(self._items.values())

    async def update(self, todo_id: int, payload: TodoUpdate) -> Todo:
        with self._lock.write_locked():
            current = self._items.get(todo_id)
            if current is None:
                raise TodoNotFoundException(todo_id)
            todo = payload.merge(current)
            self._items[todo_id] = todo
        logger.debug(f"Todo updated in memory: {todo_id}")
        return todo

    async def delete(self, todo_id: int) -> None:
        with self._lock.write_locked():
            if self._items.pop(todo_id, None) is None:
                raise TodoNotFoundException(todo_id)
        logger.debug(f"Todo deleted from memory: {todo_id}")

    def clear(self):
        """清空所有待办（id 计数器不回退）"""
        with self._lock.write_locked():
            self._items.clear()
