"""
FastAPI 应用主入口
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from todo_service.api import health, todos
from todo_service.config import Settings, get_settings
from todo_service.constants import BackendKind
from todo_service.middleware import register_exception_handlers
from todo_service.repository import DatabaseTodoRepository, TodoRepository, build_repository
from todo_service.services import TodoService

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TodoRepository] = None
) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        settings: 应用配置，默认读取环境变量
        repository: 指定的仓储实例；为空时按配置构建。
            配置缺失（如 database 后端没有 DATABASE_URL）会在这里直接抛出 ConfigurationException
    """
    settings = settings or get_settings()
    if repository is None:
        repository = build_repository(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """应用生命周期管理"""
        # 启动时
        if isinstance(repository, DatabaseTodoRepository) and settings.db_create_tables:
            logger.info("初始化数据库...")
            repository.create_tables()
        logger.info(f"{settings.app_name} 启动完成, backend={app.state.backend.value}")

        yield

        # 关闭时
        if isinstance(repository, DatabaseTodoRepository):
            repository.dispose()
            logger.info("数据库连接池已关闭")
        logger.info(f"{settings.app_name} 已停止")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=settings.app_description,
        debug=settings.debug,
        lifespan=lifespan
    )
    app.state.backend = BackendKind.DATABASE if isinstance(repository, DatabaseTodoRepository) else BackendKind.MEMORY
    app.state.todo_service = TodoService(repository)

    # 注册异常处理器
    register_exception_handlers(app)

    # 注册路由
    app.include_router(health.router, tags=["Health"])
    app.include_router(todos.router, prefix=settings.api_prefix, tags=["Todos"])

    return app
