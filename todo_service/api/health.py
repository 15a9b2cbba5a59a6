"""
健康检查接口
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root():
    """根路径"""
    return "Hello World!"


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    backend: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """健康检查"""
    return HealthResponse(
        status="healthy",
        backend=request.app.state.backend.value,
    )


@router.get("/ping")
async def ping():
    """简单的 ping 检查"""
    return {"pong": True}
