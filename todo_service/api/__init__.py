"""
HTTP 接口层
"""

from . import health, todos

__all__ = ['health', 'todos']
