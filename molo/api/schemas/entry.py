from pydantic import AliasChoices, BaseModel, Field

from molo.models.entry import ENTRY_ID_PATTERN, Entry


class EntrySave(BaseModel):
    """Schema for creating or updating a diary entry"""
    id: str = Field(
        ...,
        pattern=ENTRY_ID_PATTERN,
        description="Client-generated identifier (UUID v4); letters, digits, - and _ only"
    )
    title: str = Field(..., min_length=1)
    content: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("content", "cipherText"),
        description="Entry body, plain markdown or client-side ciphertext"
    )
    date: str = Field(..., min_length=1, description="Logical diary date as an ISO string")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Day 1",
                "content": "Hello",
                "date": "2024-01-01"
            }
        }

    def to_model(self) -> Entry:
        return Entry(id=self.id, title=self.title, content=self.content, date=self.date)


class EntryResponse(BaseModel):
    """Schema for entry response"""
    id: str
    title: str
    content: str
    date: str
    createdAt: int
    updatedAt: int
