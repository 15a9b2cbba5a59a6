"""
工具模块
"""

from .locks import ReadWriteLock

__all__ = ['ReadWriteLock']
