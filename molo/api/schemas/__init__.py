from .entry import (
    EntrySave,
    EntryResponse
)
from .auth import (
    PinRequest,
    InitStatusResponse,
    LoginResponse
)
from .common import (
    SuccessResponse,
    ErrorResponse,
    HealthResponse
)

__all__ = [
    # Entry schemas
    "EntrySave",
    "EntryResponse",

    # Auth schemas
    "PinRequest",
    "InitStatusResponse",
    "LoginResponse",

    # Common schemas
    "SuccessResponse",
    "ErrorResponse",
    "HealthResponse"
]
