from dataclasses import dataclass


@dataclass
class Credential:
    """The single stored PIN hash"""
    secret_hash: str
    created_at: int
    updated_at: int
    id: int = 1

    @classmethod
    def from_dict(cls, data: dict):
        """Create Credential from database row"""
        return cls(**data)
