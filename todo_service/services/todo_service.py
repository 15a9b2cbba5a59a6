"""
待办业务逻辑层

先校验请求，再委托给启动时选定的仓储。
"""

import logging
from typing import List

from todo_service.models.todo import Todo, TodoCreate, TodoUpdate
from todo_service.repository.base import TodoRepository
from todo_service.validation import validate_create, validate_update

logger = logging.getLogger(__name__)


class TodoService:
    """待办业务逻辑服务"""

    def __init__(self, repository: TodoRepository):
        self.repository = repository

    async def create_todo(self, payload: TodoCreate) -> Todo:
        """创建待办"""
        validate_create(payload)
        todo = await self.repository.create(payload)
        logger.info(f"Todo created: {todo.id}")
        return todo

    async def get_todo(self, todo_id: int) -> Todo:
        """获取待办详情"""
        return await self.repository.find(todo_id)

    async def list_todos(self) -> List[Todo]:
        """获取待办列表"""
        return await self.repository.list()

    async def update_todo(self, todo_id: int, payload: TodoUpdate) -> Todo:
        """更新待办"""
        validate_update(payload)
        todo = await self.repository.update(todo_id, payload)
        logger.info(f"Todo updated: {todo_id}")
        return todo

    async def delete_todo(self, todo_id: int) -> None:
        """删除待办"""
        await self.repository.delete(todo_id)
        logger.info(f"Todo deleted: {todo_id}")
