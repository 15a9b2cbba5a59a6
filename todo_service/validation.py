"""
请求参数校验

在调用存储后端之前执行，校验失败抛出 TodoValidationException。
"""

from typing import Optional

from todo_service.constants import ValidationConfig
from todo_service.exceptions import TodoValidationException
from todo_service.models.todo import TodoCreate, TodoUpdate


def validate_text(text: Optional[str], field: str = "text") -> str:
    """校验待办内容长度（按字符计）"""
    if text is None or len(text) < ValidationConfig.TEXT_MIN_LENGTH:
        raise TodoValidationException(field, ValidationConfig.TEXT_EMPTY_REASON)
    if len(text) > ValidationConfig.TEXT_MAX_LENGTH:
        raise TodoValidationException(field, ValidationConfig.TEXT_TOO_LONG_REASON, value=len(text))
    return text


def validate_create(payload: TodoCreate) -> TodoCreate:
    validate_text(payload.text)
    return payload


def validate_update(payload: TodoUpdate) -> TodoUpdate:
    # 未提供 text 时保留原值，无需校验
    if payload.text is not None:
        validate_text(payload.text)
    return payload
