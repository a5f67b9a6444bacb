"""Tag API routes."""

from fastapi import APIRouter, Depends, Query, Request

from api.v1.dependencies import get_tag_service
from api.v1.schemas.tag import PopularTagListResponse, PopularTagResponse, TagListResponse
from core.rate_limit import READ_LIMIT, limiter
from domain.services.tag_service import DEFAULT_POPULAR_TAGS_LIMIT, TagService

MAX_POPULAR_TAGS_LIMIT = 50

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get(
    "",
    response_model=TagListResponse,
    summary="List all tags",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_tags(
    request: Request,
    service: TagService = Depends(get_tag_service),
) -> TagListResponse:
    """Get every distinct tag used by any entry, sorted alphabetically."""
    tags = await service.get_all_tags()
    return TagListResponse(data=tags)


@router.get(
    "/popular",
    response_model=PopularTagListResponse,
    summary="List popular tags",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_popular_tags(
    request: Request,
    service: TagService = Depends(get_tag_service),
    limit: int = Query(DEFAULT_POPULAR_TAGS_LIMIT, ge=1, le=MAX_POPULAR_TAGS_LIMIT),
) -> PopularTagListResponse:
    """Get the most used tags with their counts, highest first (ties by name)."""
    popular = await service.get_popular_tags(limit)
    return PopularTagListResponse(
        data=[PopularTagResponse(tag=item.tag, count=item.count) for item in popular]
    )
