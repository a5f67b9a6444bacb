"""Statistics API routes."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_stats_service
from api.v1.schemas.stats import StatsDetailResponse, StatsResponse
from core.rate_limit import READ_LIMIT, limiter
from domain.services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get(
    "",
    response_model=StatsDetailResponse,
    summary="Get clipboard statistics",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_stats(
    request: Request,
    service: StatsService = Depends(get_stats_service),
) -> StatsDetailResponse:
    """
    Summarize the clipboard history.

    Includes entry counts, the number of distinct tags, the most used entry
    (null if nothing has been used yet) and the five newest entries.
    """
    stats = await service.get_stats()
    return StatsDetailResponse(data=StatsResponse.model_validate(stats))
