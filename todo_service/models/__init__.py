"""
数据模型
"""

from .todo import Todo, TodoCreate, TodoUpdate, TodoResponse
from .response import ErrorResponse


__all__ = [
    'Todo',
    'TodoCreate',
    'TodoUpdate',
    'TodoResponse',
    'ErrorResponse'
]
