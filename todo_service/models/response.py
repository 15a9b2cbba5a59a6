from pydantic import BaseModel
from typing import Optional

class ErrorResponse(BaseModel):
    """错误响应"""
    code: str = 'error'
    message: str = ''
    data: Optional[dict] = None
