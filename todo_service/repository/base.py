"""
Repository 基类
定义所有存储后端必须实现的待办 CRUD 接口
"""

from abc import ABC, abstractmethod
from typing import List

from todo_service.models.todo import Todo, TodoCreate, TodoUpdate


class TodoRepository(ABC):
    """
    待办仓储接口

    进程启动时选定一个具体实现，运行期间不切换。
    find/update/delete 在 id 不存在时抛出 TodoNotFoundException，
    其余底层错误统一抛出 UnexpectedStoreException。
    """

    @abstractmethod
    async def create(self, payload: TodoCreate) -> Todo:
        """创建待办，分配新的 id，completed 固定为 False"""

    @abstractmethod
    async def find(self, todo_id: int) -> Todo:
        """根据ID获取待办"""

    @abstractmethod
    async def list(self) -> List[Todo]:
        """获取全部待办，顺序由具体后端决定"""

    @abstractmethod
    async def update(self, todo_id: int, payload: TodoUpdate) -> Todo:
        """更新待办的 text/completed，返回更新后的状态"""

    @abstractmethod
    async def delete(self, todo_id: int) -> None:
        """物理删除"""
