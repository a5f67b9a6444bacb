"""Pydantic schemas for Tag API."""

from pydantic import BaseModel, ConfigDict


class TagListResponse(BaseModel):
    """Schema for the distinct tag list."""

    data: list[str]


class PopularTagResponse(BaseModel):
    """Schema for a tag with its occurrence count."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={"example": {"tag": "code", "count": 5}},
    )

    tag: str
    count: int


class PopularTagListResponse(BaseModel):
    """Schema for popular tags."""

    data: list[PopularTagResponse]
