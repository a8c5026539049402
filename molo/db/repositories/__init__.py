from .entry_repository import EntryRepository
from .credential_repository import CredentialRepository

__all__ = [
    "EntryRepository",
    "CredentialRepository"
]
