import re
import time
import logging
from typing import Any, Callable, List, Optional

from molo.core.exceptions import NotFoundError, ValidationError
from molo.db.repositories import EntryRepository
from molo.models.entry import ENTRY_ID_PATTERN, Entry

logger = logging.getLogger(__name__)

_ENTRY_ID_RE = re.compile(ENTRY_ID_PATTERN)


def now_ms() -> int:
    """Current time in milliseconds since the epoch"""
    return int(time.time() * 1000)


def _require_text(value: Any, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required and must be a non-empty string")
    return value


def _require_entry_id(value: Any) -> str:
    _require_text(value, "id")
    if not _ENTRY_ID_RE.fullmatch(value):
        raise ValidationError("Invalid entry ID")
    return value


class EntryService:
    """Validated CRUD over diary entries"""

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self.clock = clock or now_ms

    async def list_entries(self) -> List[Entry]:
        """All entries, most recently updated first"""
        return await EntryRepository.get_all()

    async def get_entry(self, entry_id: str) -> Entry:
        _require_entry_id(entry_id)
        entry = await EntryRepository.get_by_id(entry_id)
        if entry is None:
            raise NotFoundError()
        return entry

    async def save_entry(self, entry: Entry) -> Entry:
        """Create or update an entry keyed by its client-generated id"""
        _require_entry_id(entry.id)
        _require_text(entry.title, "title")
        _require_text(entry.content, "content")
        _require_text(entry.date, "date")

        saved = await EntryRepository.upsert(entry, self.clock())
        logger.info(f"Saved diary {saved.id}")
        return saved

    async def delete_entry(self, entry_id: str) -> None:
        _require_entry_id(entry_id)
        deleted = await EntryRepository.delete(entry_id)
        if not deleted:
            raise NotFoundError()
        logger.info(f"Deleted diary {entry_id}")

    async def count_entries(self) -> int:
        return await EntryRepository.count()


# Singleton instance
_entry_service = None

def get_entry_service() -> EntryService:
    """Get singleton EntryService instance"""
    global _entry_service
    if _entry_service is None:
        _entry_service = EntryService()
    return _entry_service
