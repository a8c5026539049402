import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from molo.api.errors import success_envelope
from molo.api.schemas import HealthResponse, SuccessResponse
from molo.auth.dependencies import optional_token
from molo.core.config import settings
from molo.db.database import get_db
from molo.db.repositories import CredentialRepository
from molo.services.entry_service import get_entry_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=SuccessResponse[HealthResponse],
    response_model_exclude_none=True
)
async def health_check(claims=Depends(optional_token)):
    """Health check; the entry count is only reported to authenticated callers"""
    initialized = None
    entry_count = None
    try:
        db = get_db()
        await db.fetch_one("SELECT 1")
        database_status = "connected"
        initialized = await CredentialRepository.exists()
        if claims is not None:
            entry_count = await get_entry_service().count_entries()
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        database_status = "disconnected"

    health = HealthResponse(
        status="ok" if database_status == "connected" else "degraded",
        version=settings.VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        database=database_status,
        initialized=initialized,
        entryCount=entry_count
    )
    return success_envelope(health.model_dump(exclude_none=True))
