import time
import logging
from typing import Any, Dict, Optional

import jwt

from molo.core.config import settings
from molo.core.exceptions import InvalidTokenError

logger = logging.getLogger(__name__)


def sign(claims: Dict[str, Any], secret: str, ttl: int, algorithm: str = "HS256") -> str:
    """Sign claims into a compact JWT that expires ``ttl`` seconds from now"""
    issued_at = int(time.time())
    payload = dict(claims)
    payload["iat"] = issued_at
    payload["exp"] = issued_at + ttl
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """Return the claims of a token, or raise InvalidTokenError"""
    try:
        return jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["exp", "iat"]}
        )
    except jwt.ExpiredSignatureError:
        raise InvalidTokenError("Token expired")
    except jwt.PyJWTError as e:
        logger.debug(f"Token rejected: {e}")
        raise InvalidTokenError()


def decode(token: str) -> Dict[str, Any]:
    """
    Read claims without checking the signature.

    For introspection only; never use the result to authorize a request.
    """
    try:
        return jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        raise InvalidTokenError("Malformed token")


class TokenService:
    """Issues and checks bearer tokens with the configured key and lifetime"""

    def __init__(
        self,
        secret: Optional[str] = None,
        ttl: Optional[int] = None,
        algorithm: Optional[str] = None
    ):
        self.secret = secret or settings.JWT_SECRET
        self.ttl = ttl if ttl is not None else settings.JWT_EXPIRES_IN
        self.algorithm = algorithm or settings.JWT_ALGORITHM

    def issue(self) -> str:
        """Issue a token for the diary owner"""
        return sign(
            {"authenticated": True, "timestamp": int(time.time() * 1000)},
            self.secret,
            self.ttl,
            self.algorithm
        )

    def verify(self, token: str) -> Dict[str, Any]:
        return verify(token, self.secret, self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        return decode(token)


# Singleton instance
_token_service = None

def get_token_service() -> TokenService:
    """Get singleton TokenService instance"""
    global _token_service
    if _token_service is None:
        _token_service = TokenService()
    return _token_service
