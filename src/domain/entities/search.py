"""Search specification for clipboard entry listings."""

from dataclasses import dataclass

DEFAULT_SEARCH_LIMIT = 50
MAX_SEARCH_LIMIT = 100


@dataclass(frozen=True)
class EntrySearch:
    """Optional filters plus pagination for a clipboard listing.

    Every filter is independent: ``None`` (or an empty string / empty tuple)
    means the category is not applied. Categories combine with AND; the
    listed tags combine with OR among themselves.
    """

    query: str | None = None
    tags: tuple[str, ...] = ()
    is_pinned: bool | None = None
    is_favorite: bool | None = None
    limit: int = DEFAULT_SEARCH_LIMIT
    offset: int = 0

    @property
    def has_text_filter(self) -> bool:
        return bool(self.query)

    @property
    def has_tag_filter(self) -> bool:
        return bool(self.tags)
