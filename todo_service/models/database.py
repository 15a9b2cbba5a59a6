"""
SQLAlchemy ORM 模型定义
用于数据库持久化操作
"""

from sqlalchemy import Column, String, Integer, Boolean

from todo_service.config.database import Base
from todo_service.constants import DatabaseConfig, ValidationConfig
from todo_service.models.todo import Todo


class TodoModel(Base):
    """待办事项表模型"""
    __tablename__ = DatabaseConfig.TODO_TABLE

    id = Column(Integer, primary_key=True, autoincrement=True, comment='待办ID')
    text = Column(String(ValidationConfig.TEXT_MAX_LENGTH), nullable=False, comment='待办内容')
    completed = Column(Boolean, nullable=False, default=False, comment='是否完成')

    __table_args__ = (
        {'comment': '待办事项表', 'sqlite_autoincrement': True},
    )

    def to_domain(self) -> Todo:
        """转换为领域模型"""
        return Todo(id=self.id, text=self.text, completed=bool(self.completed))
