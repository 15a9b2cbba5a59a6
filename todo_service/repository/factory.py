"""
存储后端选择

进程启动时根据配置构建唯一的仓储实例。
"""

import logging

from todo_service.config.settings import Settings
from todo_service.constants import BackendKind
from todo_service.exceptions import ConfigurationException
from todo_service.repository.base import TodoRepository
from todo_service.repository.database import DatabaseTodoRepository
from todo_service.repository.memory import InMemoryTodoRepository

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> TodoRepository:
    """根据 TODO_BACKEND 创建仓储；选择 database 但缺少 DATABASE_URL 时直接失败"""
    if settings.backend == BackendKind.DATABASE:
        if not settings.database_url:
            raise ConfigurationException(
                "undefined [DATABASE_URL]: required when TODO_BACKEND=database",
                setting="DATABASE_URL"
            )
        logger.info("使用数据库存储后端")
        return DatabaseTodoRepository.from_url(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
            echo=settings.db_echo
        )

    logger.info("使用内存存储后端")
    return InMemoryTodoRepository()
