"""Clipboard statistics value objects."""

from dataclasses import dataclass, field

from domain.entities.clipboard_entry import ClipboardEntry

RECENT_ENTRIES_LIMIT = 5


@dataclass(frozen=True, slots=True)
class EntryCounts:
    """Row counts computed in a single aggregate read."""

    total: int = 0
    pinned: int = 0
    favorite: int = 0


@dataclass(frozen=True)
class ClipboardStats:
    """Summary of the whole clipboard history."""

    total_entries: int
    pinned_entries: int
    favorite_entries: int
    total_tags: int
    most_used_entry: ClipboardEntry | None = None
    recent_entries: list[ClipboardEntry] = field(default_factory=list)
