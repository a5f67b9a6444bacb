"""Unit tests for clipboard domain entities."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from domain.entities.clipboard_entry import ClipboardEntry
from domain.entities.search import EntrySearch


class TestClipboardEntry:
    def test_new_entry_is_unused(self):
        entry = ClipboardEntry(content="x")

        assert entry.usage_count == 0
        assert entry.last_used_at is None
        assert entry.updated_at >= entry.created_at

    def test_stored_timestamps_are_kept_as_given(self):
        created_at = datetime(2026, 5, 2, 12, 0, 0)
        updated_at = datetime(2026, 5, 1, 12, 0, 0)

        entry = ClipboardEntry(content="x", created_at=created_at, updated_at=updated_at)

        assert entry.created_at == created_at
        assert entry.updated_at == updated_at


class TestEntrySearch:
    def test_equal_searches_hash_equal(self):
        first = EntrySearch(query="git", tags=("cli", "vcs"), limit=10)
        second = EntrySearch(query="git", tags=("cli", "vcs"), limit=10)

        assert first == second
        assert hash(first) == hash(second)

    def test_is_immutable(self):
        search = EntrySearch(tags=("cli",))

        with pytest.raises(FrozenInstanceError):
            search.tags = ("other",)  # type: ignore[misc]

    def test_empty_filters_are_not_applied(self):
        search = EntrySearch(query="", tags=())

        assert not search.has_text_filter
        assert not search.has_tag_filter
