"""
接口依赖
"""

from fastapi import Request

from todo_service.services.todo_service import TodoService


def get_todo_service(request: Request) -> TodoService:
    """获取应用启动时创建的 TodoService"""
    return request.app.state.todo_service
