"""Clipboard entry domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the store keeps naive UTC)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class ClipboardEntry:
    """Domain entity for a stored clipboard snippet."""

    content: str
    id: int | None = None  # Assigned by the store on insert
    title: str | None = None
    is_pinned: bool = False
    is_favorite: bool = False
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    usage_count: int = 0
    last_used_at: datetime | None = None
