import uuid
import logging
from urllib.parse import quote
from dataclasses import dataclass, field
from datetime import date as date_type
from typing import Any, Dict, Generic, List, Optional, TypeVar

import httpx

from .errors import NO_TOKEN, user_message
from .token_store import FileTokenStore

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_API_URL = "http://localhost:3000/api"


@dataclass
class Diary:
    """Diary entry as seen by the client"""
    id: str
    title: str
    content: str
    date: str
    createdAt: Optional[int] = None
    updatedAt: Optional[int] = None

    @classmethod
    def new(cls, title: str, content: str, date: Optional[str] = None) -> "Diary":
        """Create an unsaved entry with a fresh UUID v4"""
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            content=content,
            date=date or date_type.today().isoformat()
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Diary":
        return cls(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            date=data["date"],
            createdAt=data.get("createdAt"),
            updatedAt=data.get("updatedAt")
        )

    def to_payload(self) -> Dict[str, str]:
        return {"id": self.id, "title": self.title, "content": self.content, "date": self.date}


@dataclass
class ServiceResponse(Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    status_code: Optional[int] = field(default=None, repr=False)


class DiaryClient:
    """Async client for the diary API"""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        token_store=None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store if token_store is not None else FileTokenStore()
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    async def connect(self):
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport
            )

    async def disconnect(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def is_authenticated(self) -> bool:
        return self.token_store.get() is not None

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        protected: bool = False
    ) -> ServiceResponse:
        headers = {}
        if protected:
            token = self.token_store.get()
            if not token:
                return ServiceResponse(success=False, error=NO_TOKEN)
            headers["Authorization"] = f"Bearer {token}"

        await self.connect()
        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"{operation} failed: {e}")
            return ServiceResponse(success=False, error=user_message(operation))

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.is_success and body.get("success"):
            return ServiceResponse(success=True, data=body.get("data"), status_code=response.status_code)

        if response.status_code == 401 and protected:
            # Expired or rejected token; force a fresh login
            self.token_store.clear()

        logger.warning(f"{operation} failed with HTTP {response.status_code}: {body.get('error')}")
        return ServiceResponse(
            success=False,
            error=user_message(operation, response.status_code),
            status_code=response.status_code
        )

    async def check_init_status(self) -> ServiceResponse[Dict[str, bool]]:
        return await self._request("check_init_status", "GET", "/check-init-status")

    async def initialize(self, pin: str) -> ServiceResponse[None]:
        return await self._request("initialize", "POST", "/initialize", json={"pin": pin})

    async def login(self, pin: str) -> ServiceResponse[Dict[str, Any]]:
        result = await self._request("login", "POST", "/login", json={"pin": pin})
        if result.success and result.data and result.data.get("token"):
            self.token_store.save(result.data["token"])
        return result

    def logout(self):
        """Forget the stored token; the server keeps no session to end"""
        self.token_store.clear()

    async def list_diaries(self) -> ServiceResponse[List[Diary]]:
        result = await self._request("list_diaries", "GET", "/diaries", protected=True)
        if result.success:
            result.data = [Diary.from_dict(item) for item in result.data or []]
        return result

    async def get_diary(self, diary_id: str) -> ServiceResponse[Diary]:
        result = await self._request("get_diary", "GET", f"/diaries/{quote(diary_id, safe='')}", protected=True)
        if result.success:
            result.data = Diary.from_dict(result.data)
        return result

    async def save_diary(self, diary: Diary) -> ServiceResponse[Diary]:
        result = await self._request(
            "save_diary", "POST", "/diaries", json=diary.to_payload(), protected=True
        )
        if result.success:
            result.data = Diary.from_dict(result.data)
        return result

    async def delete_diary(self, diary_id: str) -> ServiceResponse[None]:
        return await self._request("delete_diary", "DELETE", f"/diaries/{quote(diary_id, safe='')}", protected=True)
