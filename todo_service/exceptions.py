"""
统一异常定义
提供结构化的错误处理机制
"""

from typing import Optional, Any, Dict


class TodoServiceException(Exception):
    """基础异常类"""

    def __init__(self, message: str, code: str = 'error', status_code: int = 400, details: Optional[Dict] = None):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式，用于API响应"""
        return {
            "code": self.code,
            "message": self.message,
            "data": self.details or None
        }


class TodoNotFoundException(TodoServiceException):
    """待办不存在异常"""

    def __init__(self, todo_id: int):
        self.id = todo_id
        super().__init__(
            f"NotFound id is {todo_id}",
            code='todo_not_found',
            status_code=404,
            details={"id": todo_id}
        )


class TodoValidationException(TodoServiceException):
    """待办参数验证异常"""

    def __init__(self, field: str, reason: str, value: Optional[Any] = None):
        self.field = field
        self.reason = reason
        details = {"field": field, "reason": reason}
        if value is not None:
            details["value"] = str(value)

        super().__init__(
            f"{field}: {reason}",
            code='validation_error',
            status_code=400,
            details=details
        )


class UnexpectedStoreException(TodoServiceException):
    """存储层未预期异常（驱动、I/O、序列化等）"""

    def __init__(self, detail: str, operation: Optional[str] = None):
        self.detail = detail
        details = {"detail": detail}
        if operation:
            details["operation"] = operation

        super().__init__(
            f"Unexpected Error: [{detail}]",
            code='store_error',
            status_code=500,
            details=details
        )


class ConfigurationException(TodoServiceException):
    """启动配置异常"""

    def __init__(self, message: str, setting: Optional[str] = None):
        super().__init__(
            message,
            code='config_error',
            status_code=500,
            details={"setting": setting} if setting else {}
        )
