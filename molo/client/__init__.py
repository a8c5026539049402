from .diary_client import DiaryClient, Diary, ServiceResponse
from .token_store import FileTokenStore, MemoryTokenStore
from .errors import user_message

__all__ = [
    "DiaryClient",
    "Diary",
    "ServiceResponse",
    "FileTokenStore",
    "MemoryTokenStore",
    "user_message"
]
