from pydantic import BaseModel
from typing import Optional, TypeVar, Generic

T = TypeVar('T')


class SuccessResponse(BaseModel, Generic[T]):
    """Standard success envelope"""
    success: bool = True
    data: Optional[T] = None

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "data": {"initialized": True}
            }
        }


class ErrorResponse(BaseModel):
    """Standard error envelope"""
    success: bool = False
    error: str

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "error": "Diary not found"
            }
        }


class HealthResponse(BaseModel):
    """Health check payload"""
    status: str = "ok"
    service: str = "molo-diary-api"
    version: str = "0.1.0"
    timestamp: str
    database: str = "connected"
    initialized: Optional[bool] = None
    entryCount: Optional[int] = None

    class Config:
        json_schema_extra = {
            "example": {
                "status": "ok",
                "service": "molo-diary-api",
                "version": "0.1.0",
                "timestamp": "2024-01-01T12:00:00Z",
                "database": "connected",
                "initialized": True,
                "entryCount": 3
            }
        }
