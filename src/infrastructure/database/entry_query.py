"""Query engine for clipboard entry listings.

An ``EntrySearch`` is compiled into a list of independent predicates that
are ANDed together. The listing order is fixed: pinned entries first, then
newest first. Tags live in a JSON array column, so tag predicates and the
tag index unnest that column with a dialect-specific table-valued function.
"""

from collections.abc import Sequence

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql.selectable import TableValuedAlias

from domain.entities.search import EntrySearch
from infrastructure.database.models import ClipboardEntryModel

TAG_ELEMENTS_NAME = "tag_elements"

PINNED_FIRST_ORDER = (
    ClipboardEntryModel.is_pinned.desc(),
    ClipboardEntryModel.created_at.desc(),
    ClipboardEntryModel.id.desc(),
)

NEWEST_FIRST_ORDER = (
    ClipboardEntryModel.created_at.desc(),
    ClipboardEntryModel.id.desc(),
)


def tag_elements(dialect_name: str) -> TableValuedAlias:
    """Unnest each row's tag list into a single ``value`` column.

    PostgreSQL uses ``json_array_elements_text``; SQLite uses ``json_each``.
    Both reference ``clipboard_entries.tags`` from the enclosing FROM clause.
    """
    if dialect_name == "postgresql":
        return (
            func.json_array_elements_text(ClipboardEntryModel.tags)
            .table_valued("value", joins_implicitly=True)
            .render_derived(name=TAG_ELEMENTS_NAME)
        )
    return func.json_each(ClipboardEntryModel.tags).table_valued(
        "value", name=TAG_ELEMENTS_NAME, joins_implicitly=True
    )


def text_predicate(query: str) -> ColumnElement[bool]:
    """Case-insensitive substring match on content or title.

    A NULL title never matches, so only content is considered for untitled
    entries. ``%`` and ``_`` in the query are matched literally.

    PostgreSQL compiles this to ``ILIKE``, which folds case for any script.
    SQLite compiles it to ``lower(...) LIKE lower(...)`` and its ``lower()``
    only folds ASCII, so ``"école"`` does not match ``"ÉCOLE"`` there.
    """
    return ClipboardEntryModel.content.icontains(
        query, autoescape=True
    ) | ClipboardEntryModel.title.icontains(query, autoescape=True)


def tag_predicate(tags: Sequence[str], dialect_name: str) -> ColumnElement[bool]:
    """Match entries whose tag list contains at least one of ``tags``."""
    elements = tag_elements(dialect_name)
    return select(elements.c.value).where(elements.c.value.in_(tags)).exists()


def flag_predicate(
    column: InstrumentedAttribute[bool], value: bool
) -> ColumnElement[bool]:
    """Exact equality on a boolean flag column."""
    return column == value


def build_filters(search: EntrySearch, dialect_name: str) -> list[ColumnElement[bool]]:
    """Compile every filter category present in ``search``."""
    filters: list[ColumnElement[bool]] = []

    if search.has_text_filter:
        filters.append(text_predicate(search.query))  # type: ignore[arg-type]

    if search.has_tag_filter:
        filters.append(tag_predicate(search.tags, dialect_name))

    if search.is_pinned is not None:
        filters.append(flag_predicate(ClipboardEntryModel.is_pinned, search.is_pinned))

    if search.is_favorite is not None:
        filters.append(flag_predicate(ClipboardEntryModel.is_favorite, search.is_favorite))

    return filters


def build_listing_query(
    search: EntrySearch | None, dialect_name: str
) -> Select[tuple[ClipboardEntryModel]]:
    """Build the SELECT for a listing.

    ``None`` is the "get all" path: no filters and no pagination. Any
    search, even one with no filters, is paginated with its limit/offset.
    """
    stmt = select(ClipboardEntryModel)

    if search is not None:
        filters = build_filters(search, dialect_name)
        if filters:
            stmt = stmt.where(*filters)

    stmt = stmt.order_by(*PINNED_FIRST_ORDER)

    if search is not None:
        stmt = stmt.limit(search.limit).offset(search.offset)

    return stmt
