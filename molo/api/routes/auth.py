import logging

from fastapi import APIRouter

from molo.api.errors import success_envelope
from molo.api.schemas import (
    PinRequest,
    InitStatusResponse,
    LoginResponse,
    SuccessResponse,
    ErrorResponse
)
from molo.core.exceptions import MoloError, UnexpectedError
from molo.services.auth_service import get_auth_service

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["authentication"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    }
)


@router.get(
    "/check-init-status",
    response_model=SuccessResponse[InitStatusResponse],
    response_model_exclude_none=True
)
async def check_init_status():
    """Report whether the access PIN has been set"""
    try:
        status = await get_auth_service().check_init_status()
        return success_envelope(status)
    except MoloError:
        raise
    except Exception as e:
        logger.error(f"Failed to check init status: {e}")
        raise UnexpectedError("Failed to check init status") from e


@router.post(
    "/initialize",
    response_model=SuccessResponse[None],
    response_model_exclude_none=True
)
async def initialize(request: PinRequest):
    """Set the access PIN; only the first call succeeds"""
    try:
        await get_auth_service().initialize(request.pin)
        return success_envelope()
    except MoloError:
        raise
    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        raise UnexpectedError("Failed to initialize") from e


@router.post(
    "/login",
    response_model=SuccessResponse[LoginResponse],
    response_model_exclude_none=True
)
async def login(request: PinRequest):
    """Exchange the access PIN for a bearer token"""
    try:
        result = await get_auth_service().login(request.pin)
        return success_envelope(result)
    except MoloError:
        raise
    except Exception as e:
        logger.error(f"Failed to login: {e}")
        raise UnexpectedError("Failed to login") from e
