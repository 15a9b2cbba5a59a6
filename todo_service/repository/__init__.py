"""
Repository 数据访问层
"""

from .base import TodoRepository
from .memory import InMemoryTodoRepository
from .database import DatabaseTodoRepository
from .factory import build_repository

__all__ = ['TodoRepository', 'InMemoryTodoRepository', 'DatabaseTodoRepository', 'build_repository']
