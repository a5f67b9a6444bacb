"""Clipboard entry API routes."""

from fastapi import APIRouter, Depends, Query, Request, status

from api.v1.dependencies import get_entry_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.entry import (
    BulkDeleteRequest,
    DeletedCount,
    DeletedCountResponse,
    EntryCreate,
    EntryDetailResponse,
    EntryListResponse,
    EntryResponse,
    EntryUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.clipboard_entry import ClipboardEntry
from domain.entities.search import DEFAULT_SEARCH_LIMIT, MAX_SEARCH_LIMIT, EntrySearch
from domain.services.entry_service import EntryService

router = APIRouter(prefix="/entries", tags=["entries"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Entry not found"}}


@router.get(
    "",
    response_model=EntryListResponse,
    summary="List all entries",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_entries(
    request: Request,
    service: EntryService = Depends(get_entry_service),
) -> EntryListResponse:
    """Get every entry, pinned first then newest first, without pagination."""
    entries = await service.get_all()
    return EntryListResponse(
        data=[_build_entry_response(entry) for entry in entries],
        meta={"total": len(entries)},
    )


@router.get(
    "/search",
    response_model=EntryListResponse,
    summary="Search entries",
    responses={422: {"model": ErrorResponse, "description": "Invalid limit or offset"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def search_entries(
    request: Request,
    service: EntryService = Depends(get_entry_service),
    query: str | None = Query(None, description="Case-insensitive text in content or title"),
    tags: list[str] | None = Query(None, description="Match entries having any of these tags"),
    is_pinned: bool | None = Query(None, description="Filter by pinned status"),
    is_favorite: bool | None = Query(None, description="Filter by favorite status"),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, ge=1, le=MAX_SEARCH_LIMIT),
    offset: int = Query(0, ge=0),
) -> EntryListResponse:
    """
    Search entries with optional filters.

    Filter categories combine with AND; multiple `tags` combine with OR.
    Results are ordered pinned first, then newest first, and paginated.
    """
    search = EntrySearch(
        query=query,
        tags=tuple(tags or ()),
        is_pinned=is_pinned,
        is_favorite=is_favorite,
        limit=limit,
        offset=offset,
    )
    entries = await service.search(search)
    return EntryListResponse(
        data=[_build_entry_response(entry) for entry in entries],
        meta={"total": len(entries), "limit": limit, "offset": offset},
    )


@router.post(
    "",
    response_model=EntryDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an entry",
    responses={
        201: {"description": "Entry created successfully"},
        422: {"model": ErrorResponse, "description": "Validation error"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_entry(
    request: Request,
    body: EntryCreate,
    service: EntryService = Depends(get_entry_service),
) -> EntryDetailResponse:
    """Store a new clipboard snippet."""
    entry = await service.create(content=body.content, title=body.title, tags=body.tags)
    return EntryDetailResponse(data=_build_entry_response(entry))


@router.patch(
    "/{entry_id}",
    response_model=EntryDetailResponse,
    summary="Update an entry",
    responses=_NOT_FOUND,
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_entry(
    request: Request,
    entry_id: int,
    body: EntryUpdate,
    service: EntryService = Depends(get_entry_service),
) -> EntryDetailResponse:
    """
    Update an entry. All fields are optional (partial update).

    Omitted fields are left unchanged. Send `title: null` to clear the title.
    """
    entry = await service.update(entry_id, **body.model_dump(exclude_unset=True))
    return EntryDetailResponse(data=_build_entry_response(entry))


@router.delete(
    "/{entry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an entry",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_entry(
    request: Request,
    entry_id: int,
    service: EntryService = Depends(get_entry_service),
) -> None:
    """Delete an entry. Succeeds even if the entry does not exist."""
    await service.delete(entry_id)
    return None


@router.post(
    "/bulk-delete",
    response_model=DeletedCountResponse,
    summary="Delete several entries",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def bulk_delete_entries(
    request: Request,
    body: BulkDeleteRequest,
    service: EntryService = Depends(get_entry_service),
) -> DeletedCountResponse:
    """Delete every listed entry that exists. Unknown IDs are ignored."""
    deleted_count = await service.bulk_delete(body.ids)
    return DeletedCountResponse(data=DeletedCount(deleted_count=deleted_count))


@router.delete(
    "",
    response_model=DeletedCountResponse,
    summary="Clear all entries",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def clear_all_entries(
    request: Request,
    service: EntryService = Depends(get_entry_service),
) -> DeletedCountResponse:
    """Delete the whole clipboard history."""
    deleted_count = await service.clear_all()
    return DeletedCountResponse(data=DeletedCount(deleted_count=deleted_count))


@router.post(
    "/{entry_id}/usage",
    response_model=EntryDetailResponse,
    summary="Track entry usage",
    responses=_NOT_FOUND,
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def track_usage(
    request: Request,
    entry_id: int,
    service: EntryService = Depends(get_entry_service),
) -> EntryDetailResponse:
    """Record that an entry was used (pasted). Increments its usage count."""
    entry = await service.track_usage(entry_id)
    return EntryDetailResponse(data=_build_entry_response(entry))


def _build_entry_response(entry: ClipboardEntry) -> EntryResponse:
    """Convert domain entity to response schema."""
    return EntryResponse.model_validate(entry)
