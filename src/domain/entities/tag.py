"""Tag value objects.

Tags are not stored on their own: they live inside each entry's tag list
and are derived on read.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TagCount:
    """Read-only value object: a tag bundled with its occurrence count."""

    tag: str
    count: int
