import time
import logging
from typing import Any, Dict, Optional

import bcrypt

from molo.core.config import settings
from molo.core.exceptions import (
    AlreadyInitializedError,
    InvalidCredentialError,
    InvalidTokenError,
    NotInitializedError,
    ValidationError
)
from molo.db.repositories import CredentialRepository
from .token_service import TokenService, get_token_service

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of its input
MAX_SECRET_BYTES = 72


def hash_secret(secret: str, rounds: Optional[int] = None) -> str:
    """Hash a PIN using bcrypt with a fresh salt"""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(secret.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_secret(secret: str, hashed: str) -> bool:
    """Verify a PIN against a stored hash"""
    try:
        return bcrypt.checkpw(secret.encode('utf-8'), hashed.encode('utf-8'))
    except ValueError:
        # Malformed stored hash
        return False


def _require_secret(secret: Any) -> str:
    if not isinstance(secret, str) or not secret:
        raise ValidationError("PIN is required and must be a non-empty string")
    if len(secret.encode('utf-8')) > MAX_SECRET_BYTES:
        raise ValidationError(f"PIN must be at most {MAX_SECRET_BYTES} bytes")
    return secret


def _now_ms() -> int:
    return int(time.time() * 1000)


class AuthenticationService:
    """One-time PIN setup, PIN login and bearer token checks"""

    def __init__(self, token_service: Optional[TokenService] = None, rounds: Optional[int] = None):
        self.token_service = token_service or get_token_service()
        self.rounds = rounds

    async def check_init_status(self) -> Dict[str, bool]:
        """Report whether a PIN has been set"""
        return {"initialized": await CredentialRepository.exists()}

    async def initialize(self, secret: Any) -> None:
        """Store the PIN hash; succeeds at most once for the lifetime of the store"""
        secret = _require_secret(secret)

        if await CredentialRepository.exists():
            raise AlreadyInitializedError()

        secret_hash = hash_secret(secret, self.rounds)

        # The existence check above is only a fast path; the insert decides
        created = await CredentialRepository.create_if_absent(secret_hash, _now_ms())
        if not created:
            raise AlreadyInitializedError()

        logger.info("Diary initialized")

    async def login(self, secret: Any) -> Dict[str, Any]:
        """Check the PIN and issue a bearer token"""
        secret = _require_secret(secret)

        credential = await CredentialRepository.get()
        if credential is None:
            raise NotInitializedError()

        if not verify_secret(secret, credential.secret_hash):
            logger.warning("Login failed: invalid PIN")
            raise InvalidCredentialError()

        token = self.token_service.issue()
        logger.info("Login successful")
        return {"token": token, "expiresIn": self.token_service.ttl}

    def authenticate(self, token: Optional[str]) -> Dict[str, Any]:
        """Return the claims of a valid bearer token"""
        if not token:
            raise InvalidTokenError("No token provided")

        claims = self.token_service.verify(token)
        if claims.get("authenticated") is not True:
            raise InvalidTokenError()
        return claims


# Singleton instance
_auth_service = None

def get_auth_service() -> AuthenticationService:
    """Get singleton AuthenticationService instance"""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthenticationService()
    return _auth_service
