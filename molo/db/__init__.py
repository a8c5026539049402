from .database import db, get_db, init_db, close_db
from .repositories import (
    EntryRepository,
    CredentialRepository
)

__all__ = [
    "db",
    "get_db",
    "init_db",
    "close_db",
    "EntryRepository",
    "CredentialRepository"
]
