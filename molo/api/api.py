from fastapi import APIRouter

from molo.api.routes import (
    auth_router,
    diaries_router,
    health_router
)
from molo.core.config import settings

# Create main API router
api_router = APIRouter(prefix=settings.API_PREFIX)

# Include all route modules
api_router.include_router(auth_router)
api_router.include_router(diaries_router)
api_router.include_router(health_router)
