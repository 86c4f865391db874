"""Series endpoints — FRED observations, single and batched (cache-first)."""
import structlog
from fastapi import APIRouter, Depends, Query

from fred_proxy.api.v1.deps import get_series_service
from fred_proxy.api.v1.models import BatchSeriesRequest
from fred_proxy.core.data.service import SeriesService
from fred_proxy.core.errors import ClientInputError

logger = structlog.get_logger()

router = APIRouter(tags=["Series"])


@router.post("/series/batch")
async def get_series_batch(
    body: BatchSeriesRequest,
    service: SeriesService = Depends(get_series_service),
):
    """Fetch several series at once; failures are reported per series."""
    return await service.get_many(body.series, body.start_date, body.end_date)


@router.get("/series", include_in_schema=False)
@router.get("/series/", include_in_schema=False)
async def get_series_missing_id():
    logger.warning("validation.missing_series_id")
    raise ClientInputError("Missing series_id parameter")


@router.get("/series/{series_id}")
async def get_series(
    series_id: str,
    start_date: str | None = Query(None),
    end_date: str | None = Query(None),
    sort_order: str = Query("desc"),
    service: SeriesService = Depends(get_series_service),
):
    """Observations for one series — served from cache while fresh."""
    return await service.get_series(series_id, start_date, end_date, sort_order)
