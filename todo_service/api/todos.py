"""
待办管理接口
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from todo_service.api.dependencies import get_todo_service
from todo_service.constants import DatabaseConfig
from todo_service.models import TodoCreate, TodoUpdate, TodoResponse, ErrorResponse
from todo_service.services.todo_service import TodoService

logger = logging.getLogger(__name__)
router = APIRouter()

# 路径中的待办ID限定在 int32 范围内
TodoId = Path(..., ge=DatabaseConfig.ID_MIN, le=DatabaseConfig.ID_MAX)

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


@router.post(
    "/todos",
    response_model=TodoResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST
)
async def create_todo(payload: TodoCreate, service: TodoService = Depends(get_todo_service)):
    """创建待办"""
    todo = await service.create_todo(payload)
    return TodoResponse.from_domain(todo)


@router.get("/todos", response_model=List[TodoResponse])
async def list_todos(service: TodoService = Depends(get_todo_service)):
    """获取所有待办"""
    todos = await service.list_todos()
    return [TodoResponse.from_domain(todo) for todo in todos]


@router.get("/todos/{todo_id}", response_model=TodoResponse, responses=NOT_FOUND)
async def find_todo(todo_id: int = TodoId, service: TodoService = Depends(get_todo_service)):
    """获取待办详情"""
    todo = await service.get_todo(todo_id)
    return TodoResponse.from_domain(todo)


@router.patch("/todos/{todo_id}", response_model=TodoResponse, responses={**NOT_FOUND, **BAD_REQUEST})
async def update_todo(
    payload: TodoUpdate,
    todo_id: int = TodoId,
    service: TodoService = Depends(get_todo_service)
):
    """更新待办"""
    todo = await service.update_todo(todo_id, payload)
    return TodoResponse.from_domain(todo)


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
async def delete_todo(todo_id: int = TodoId, service: TodoService = Depends(get_todo_service)):
    """删除待办"""
    await service.delete_todo(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
