"""Cache administration endpoint."""
import structlog
from fastapi import APIRouter, Depends

from fred_proxy.api.v1.deps import get_series_service
from fred_proxy.api.v1.models import CacheCleared
from fred_proxy.core.data.service import SeriesService

router = APIRouter(tags=["Cache"])
logger = structlog.get_logger()


@router.post("/cache/clear", response_model=CacheCleared)
async def clear_cache(service: SeriesService = Depends(get_series_service)):
    """Drop every cached payload; the next lookups all go upstream."""
    size = service.cache.clear()
    logger.info("cache.cleared")
    return CacheCleared(cache_size=size)
