from .entry import Entry
from .credential import Credential

__all__ = [
    "Entry",
    "Credential"
]
