from dataclasses import dataclass
from typing import Optional

# Ids travel as a single URL path segment
ENTRY_ID_PATTERN = r"^[A-Za-z0-9_-]{1,128}$"


@dataclass
class Entry:
    """Diary entry model"""
    id: str
    title: str
    content: str
    date: str
    created_at: Optional[int] = None  # ms since epoch, set by the store
    updated_at: Optional[int] = None

    def to_dict(self):
        """Convert to dictionary for database storage"""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    def to_api(self):
        """Convert to the camelCase shape clients expect"""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "date": self.date,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at
        }

    @classmethod
    def from_dict(cls, data: dict):
        """Create Entry from database row"""
        return cls(**data)
