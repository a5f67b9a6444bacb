"""Pydantic schemas for ClipboardEntry API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EntryCreate(BaseModel):
    """Schema for creating a ClipboardEntry."""

    content: str = Field(..., min_length=1)
    title: str | None = None
    tags: list[str] = Field(default_factory=list)


class EntryUpdate(BaseModel):
    """Schema for updating a ClipboardEntry (all fields optional).

    Only fields present in the request body are applied. ``title`` may be
    sent as ``null`` to clear it; the other fields may not be null.
    """

    content: str | None = Field(None, min_length=1)
    title: str | None = None
    is_pinned: bool | None = None
    is_favorite: bool | None = None
    tags: list[str] | None = None

    @field_validator("content", "is_pinned", "is_favorite", "tags", mode="before")
    @classmethod
    def reject_null(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v


class BulkDeleteRequest(BaseModel):
    """Schema for deleting several entries at once."""

    ids: list[int] = Field(..., min_length=1)


class EntryResponse(BaseModel):
    """Schema for ClipboardEntry response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 42,
                "content": "git rebase -i HEAD~3",
                "title": "Interactive rebase",
                "is_pinned": True,
                "is_favorite": False,
                "tags": ["git", "cli"],
                "created_at": "2026-01-28T10:00:00",
                "updated_at": "2026-01-28T10:05:00",
                "usage_count": 3,
                "last_used_at": "2026-01-28T10:05:00",
            }
        },
    )

    id: int
    content: str
    title: str | None
    is_pinned: bool
    is_favorite: bool
    tags: list[str]
    created_at: datetime
    updated_at: datetime
    usage_count: int
    last_used_at: datetime | None


class EntryListResponse(BaseModel):
    """Schema for list of ClipboardEntries."""

    data: list[EntryResponse]
    meta: dict[str, Any] | None = None


class EntryDetailResponse(BaseModel):
    """Schema for single ClipboardEntry."""

    data: EntryResponse


class DeletedCount(BaseModel):
    """Number of entries removed by a bulk operation."""

    deleted_count: int


class DeletedCountResponse(BaseModel):
    """Schema for bulk deletion results."""

    data: DeletedCount
