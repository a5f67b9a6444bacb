"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.entries import router as entries_router
from api.v1.routes.stats import router as stats_router
from api.v1.routes.tags import router as tags_router

router = APIRouter()
router.include_router(entries_router)
router.include_router(tags_router)
router.include_router(stats_router)
