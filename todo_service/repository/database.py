"""
数据库待办仓储

每个操作对应一次参数化查询；会话操作在线程池中执行，调用方可 await。
"""

import logging
from contextlib import contextmanager
from typing import List

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import desc
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from todo_service.constants import DatabaseConfig
from todo_service.config.database import create_db_engine, create_session_factory, session_scope, init_db
from todo_service.exceptions import TodoNotFoundException, UnexpectedStoreException
from todo_service.models.database import TodoModel
from todo_service.models.todo import Todo, TodoCreate, TodoUpdate
from todo_service.repository.base import TodoRepository

logger = logging.getLogger(__name__)


class DatabaseTodoRepository(TodoRepository):
    """基于 SQLAlchemy 的待办仓储"""

    def __init__(self, engine: Engine):
        self.engine = engine
        self.session_factory = create_session_factory(engine)

    @classmethod
    def from_url(cls, database_url: str, **engine_options) -> 'DatabaseTodoRepository':
        """根据连接串创建仓储（连接池参数见 create_db_engine）"""
        return cls(create_db_engine(database_url, **engine_options))

    def create_tables(self):
        """创建待办表（已存在则跳过）"""
        init_db(self.engine)

    def dispose(self):
        """关闭连接池"""
        self.engine.dispose()

    @contextmanager
    def _session(self, operation: str):
        """会话上下文，底层数据库错误统一转换为 UnexpectedStoreException"""
        try:
            with session_scope(self.session_factory) as db:
                yield db
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError: 驱动无法绑定超出列类型范围的参数
            logger.error(f"Database error during {operation}: {e}")
            raise UnexpectedStoreException(str(e), operation=operation) from e

    # ---- 接口实现 ----

    async def create(self, payload: TodoCreate) -> Todo:
        return await run_in_threadpool(self._create, payload.text)

    async def find(self, todo_id: int) -> Todo:
        return await run_in_threadpool(self._find, todo_id)

    async def list(self) -> List[Todo]:
        return await run_in_threadpool(self._list)

    async def update(self, todo_id: int, payload: TodoUpdate) -> Todo:
        # 先查询再更新，两次往返不在同一事务中：
        # 对同一 id 的并发更新可能出现丢失更新
        current = await self.find(todo_id)
        merged = payload.merge(current)
        return await run_in_threadpool(self._update, merged)

    async def delete(self, todo_id: int) -> None:
        await run_in_threadpool(self._delete, todo_id)

    # ---- 同步实现（在线程池中运行） ----

    def _create(self, text: str) -> Todo:
        with self._session("create") as db:
            model = TodoModel(text=text, completed=False)
            db.add(model)
            db.flush()  # 获取生成的ID
            todo = model.to_domain()
        logger.info(f"Todo saved to database: {todo.id}")
        return todo

    @staticmethod
    def _check_id(todo_id: int):
        """超出 int32 范围的 id 不可能存在"""
        if not DatabaseConfig.ID_MIN <= todo_id <= DatabaseConfig.ID_MAX:
            raise TodoNotFoundException(todo_id)

    def _find(self, todo_id: int) -> Todo:
        self._check_id(todo_id)
        with self._session("find") as db:
            model = db.query(TodoModel).filter(TodoModel.id == todo_id).first()
            if model is None:
                raise TodoNotFoundException(todo_id)
            return model.to_domain()

    def _list(self) -> List[Todo]:
        with self._session("list") as db:
            models = db.query(TodoModel).order_by(desc(TodoModel.id)).all()
            return [model.to_domain() for model in models]

    def _update(self, todo: Todo) -> Todo:
        with self._session("update") as db:
            matched = db.query(TodoModel).filter(TodoModel.id == todo.id).update(
                {TodoModel.text: todo.text, TodoModel.completed: todo.completed},
                synchronize_session=False
            )
            if matched == 0:
                # 查询之后被并发删除
                raise TodoNotFoundException(todo.id)
        logger.info(f"Todo updated in database: {todo.id}")
        return todo

    def _delete(self, todo_id: int):
        self._check_id(todo_id)
        with self._session("delete") as db:
            deleted = db.query(TodoModel).filter(TodoModel.id == todo_id).delete(
                synchronize_session=False
            )
            if deleted == 0:
                raise TodoNotFoundException(todo_id)
        logger.info(f"Todo deleted from database: {todo_id}")
