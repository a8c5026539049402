from .auth import router as auth_router
from .diaries import router as diaries_router
from .health import router as health_router

__all__ = [
    "auth_router",
    "diaries_router",
    "health_router"
]
