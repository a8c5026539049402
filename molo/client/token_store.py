import os
import logging
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_PATH = Path.home() / ".molo" / "token"


class MemoryTokenStore:
    """Keeps the token for the lifetime of the process"""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get(self) -> Optional[str]:
        return self._token

    def save(self, token: str):
        self._token = token

    def clear(self):
        self._token = None


class FileTokenStore:
    """Persists the token in a file readable only by the current user"""

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = Path(path) if path else DEFAULT_TOKEN_PATH

    def get(self) -> Optional[str]:
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # New files are created 0600; an existing file keeps its mode until fchmod
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            os.fchmod(fd, 0o600)
        except (AttributeError, OSError) as e:
            logger.warning(f"Could not restrict permissions on {self.path}: {e}")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(token)

    def clear(self):
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
