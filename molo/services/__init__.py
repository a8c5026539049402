from .auth_service import AuthenticationService, get_auth_service, hash_secret, verify_secret
from .entry_service import EntryService, get_entry_service
from .token_service import TokenService, get_token_service

__all__ = [
    "AuthenticationService",
    "get_auth_service",
    "hash_secret",
    "verify_secret",
    "EntryService",
    "get_entry_service",
    "TokenService",
    "get_token_service"
]
