"""Pydantic schemas for Stats API."""

from pydantic import BaseModel, ConfigDict

from api.v1.schemas.entry import EntryResponse


class StatsResponse(BaseModel):
    """Schema for clipboard statistics."""

    model_config = ConfigDict(from_attributes=True)

    total_entries: int
    pinned_entries: int
    favorite_entries: int
    total_tags: int
    most_used_entry: EntryResponse | None
    recent_entries: list[EntryResponse]


class StatsDetailResponse(BaseModel):
    """Schema wrapping statistics."""

    data: StatsResponse
