from .api import api_router
from .schemas import *
from .errors import (
    status_code_for,
    success_envelope,
    error_envelope
)

__all__ = [
    "api_router",
    "status_code_for",
    "success_envelope",
    "error_envelope"
]
