"""
统一异常处理中间件
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from todo_service.exceptions import TodoServiceException
from todo_service.models.response import ErrorResponse

logger = logging.getLogger(__name__)


async def todo_exception_handler(
    request: Request,
    exc: TodoServiceException
) -> JSONResponse:
    """处理自定义业务异常"""
    if exc.status_code >= 500:
        logger.error(f"Service exception: {exc.code} - {exc.message}")
    else:
        logger.warning(f"Business exception: {exc.code} - {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """处理请求体/路径参数格式错误"""
    errors = exc.errors()
    logger.warning(f"Request validation failed: {request.method} {request.url.path} - {len(errors)} error(s)")
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            code="validation_error",
            message=first.get("msg", "Invalid request"),
            data={"field": field or None, "reason": first.get("type")}
        ).model_dump()
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """处理通用异常"""
    logger.error(f"Unhandled exception: {type(exc).__name__} - {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            code="internal_error",
            message="Internal server error"
        ).model_dump()
    )


def register_exception_handlers(app: FastAPI):
    """注册异常处理器"""
    app.add_exception_handler(TodoServiceException, todo_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
