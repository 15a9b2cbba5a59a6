"""
待办数据模型定义
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, StrictBool


@dataclass(frozen=True)
class Todo:
    """待办模型（不可变，调用方拿到的是值而不是后端内部状态的引用）"""
    id: int
    text: str
    completed: bool = False


class TodoCreate(BaseModel):
    """创建待办请求"""
    text: str


class TodoUpdate(BaseModel):
    """
    更新待办请求

    未提供的字段保留当前值；提供的字段直接覆盖（包括 completed=False）。
    """
    text: Optional[str] = None
    completed: Optional[StrictBool] = None

    def merge(self, current: Todo) -> Todo:
        """将更新内容合并到当前状态上"""
        return Todo(
            id=current.id,
            text=self.text if self.text is not None else current.text,
            completed=self.completed if self.completed is not None else current.completed
        )


class TodoResponse(BaseModel):
    """待办响应"""
    id: int
    text: str
    completed: bool

    @classmethod
    def from_domain(cls, todo: Todo) -> 'TodoResponse':
        return cls(id=todo.id, text=todo.text, completed=todo.completed)
