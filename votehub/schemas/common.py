# votehub/schemas/common.py
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class ApiResponse(BaseModel, Generic[T]):
    """공통 응답 형식"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None

class MessageResponse(BaseModel):
    success: bool = True
    message: str

class PasswordCheckResponse(BaseModel):
    success: bool = True
    is_valid: bool
