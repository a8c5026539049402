import logging
from typing import List

from fastapi import APIRouter, Depends, Path

from molo.api.errors import success_envelope
from molo.api.schemas import EntrySave, EntryResponse, ErrorResponse, SuccessResponse
from molo.auth.dependencies import require_token
from molo.core.exceptions import MoloError, UnexpectedError
from molo.services.entry_service import get_entry_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/diaries",
    tags=["diaries"],
    dependencies=[Depends(require_token)],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)


@router.get(
    "",
    response_model=SuccessResponse[List[EntryResponse]],
    response_model_exclude_none=True
)
async def list_diaries():
    """List all diary entries, most recently updated first"""
    try:
        entries = await get_entry_service().list_entries()
        return success_envelope([entry.to_api() for entry in entries])
    except MoloError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch diaries: {e}")
        raise UnexpectedError("Failed to fetch diaries") from e


@router.get(
    "/{entry_id}",
    response_model=SuccessResponse[EntryResponse],
    response_model_exclude_none=True
)
async def get_diary(entry_id: str = Path(..., description="Entry ID")):
    """Get a single diary entry"""
    try:
        entry = await get_entry_service().get_entry(entry_id)
        return success_envelope(entry.to_api())
    except MoloError:
        raise
    except Exception as e:
        logger.error(f"Failed to fetch diary {entry_id}: {e}")
        raise UnexpectedError("Failed to fetch diary") from e


@router.post(
    "",
    response_model=SuccessResponse[EntryResponse],
    response_model_exclude_none=True
)
async def save_diary(entry_data: EntrySave):
    """Create a diary entry, or update it if the id already exists"""
    try:
        entry = await get_entry_service().save_entry(entry_data.to_model())
        return success_envelope(entry.to_api())
    except MoloError:
        raise
    except Exception as e:
        logger.error(f"Failed to save diary {entry_data.id}: {e}")
        raise UnexpectedError("Failed to save diary") from e


@router.delete(
    "/{entry_id}",
    response_model=SuccessResponse[None],
    response_model_exclude_none=True
)
async def delete_diary(entry_id: str = Path(..., description="Entry ID")):
    """Delete a diary entry"""
    try:
        await get_entry_service().delete_entry(entry_id)
        return success_envelope()
    except MoloError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete diary {entry_id}: {e}")
        raise UnexpectedError("Failed to delete diary") from e
