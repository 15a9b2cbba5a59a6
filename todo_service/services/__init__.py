"""
Service 业务逻辑层
"""

from .todo_service import TodoService

__all__ = ['TodoService']
