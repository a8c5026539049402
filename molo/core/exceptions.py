"""
Error taxonomy shared by the services and the API layer.

Services raise these; only the API exception handlers translate them into
HTTP status codes and response envelopes.
"""
from typing import Dict, Optional


class MoloError(Exception):
    """Base exception for all expected diary failures"""
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None


class ValidationError(MoloError):
    """Raised when input is missing or malformed"""
    status_code = 400
    default_message = "Invalid request"


class AlreadyInitializedError(MoloError):
    """Raised when a credential already exists"""
    status_code = 400
    default_message = "System already initialized"


class NotInitializedError(MoloError):
    """Raised when logging in before a credential exists"""
    status_code = 400
    default_message = "System not initialized"


class InvalidCredentialError(MoloError):
    """Raised when the PIN does not match the stored hash"""
    status_code = 401
    default_message = "Invalid PIN"


class InvalidTokenError(MoloError):
    """Raised when a bearer token is missing, malformed, forged or expired"""
    status_code = 401
    default_message = "Invalid token"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class NotFoundError(MoloError):
    """Raised when a diary entry does not exist"""
    status_code = 404
    default_message = "Diary not found"


class UnexpectedError(MoloError):
    """Catch-all for storage or backend failures"""
    status_code = 500
    default_message = "Internal server error"
