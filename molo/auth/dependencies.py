from fastapi import Request
from typing import Optional, Dict, Any

from molo.core.exceptions import InvalidTokenError
from molo.services.auth_service import get_auth_service


def _bearer_token(request: Request) -> Optional[str]:
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        return None

    scheme, _, token = auth_header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_token(request: Request) -> Dict[str, Any]:
    """
    Dependency that rejects the request unless it carries a valid bearer token.
    Use this on all protected endpoints.
    """
    token = _bearer_token(request)
    if token is None:
        raise InvalidTokenError("No token provided")

    claims = get_auth_service().authenticate(token)
    request.state.claims = claims
    return claims


async def optional_token(request: Request) -> Optional[Dict[str, Any]]:
    """
    Optional dependency that validates the token if present.
    Returns None if no valid token.
    """
    try:
        return await require_token(request)
    except InvalidTokenError:
        return None
