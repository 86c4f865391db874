"""SeriesService — cache-first access to FRED observations, single and batched."""
import asyncio
from typing import Any

import structlog

from fred_proxy.core.data.cache.memory_cache import SeriesCache, cache_key
from fred_proxy.core.data.providers.base import (
    FetchOutcome,
    FetchSuccess,
    SeriesProvider,
    TransportFailure,
    UpstreamFailure,
)
from fred_proxy.core.errors import (
    ClientInputError,
    ConfigurationError,
    UpstreamServiceError,
    UpstreamTransportError,
)

logger = structlog.get_logger()

BATCH_SORT_ORDER = "desc"


class SeriesService:
    """Checks the cache before hitting the upstream provider, writing through on success."""

    def __init__(self, provider: SeriesProvider, cache: SeriesCache | None = None):
        self._provider = provider
        self._cache = cache if cache is not None else SeriesCache()
        self._pending: set[asyncio.Future] = set()

    @property
    def cache(self) -> SeriesCache:
        return self._cache

    @property
    def credential_configured(self) -> bool:
        return self._provider.configured

    async def get_series(
        self,
        series_id: str | None,
        start_date: str | None = None,
        end_date: str | None = None,
        sort_order: str = "desc",
    ) -> Any:
        """Return observations for one series, raising a ProxyError on failure."""
        series_id = (series_id or "").strip()
        if not series_id:
            logger.warning("validation.missing_series_id")
            raise ClientInputError("Missing series_id parameter")
        self._require_credential()

        outcome = await self._lookup(series_id, start_date, end_date, sort_order)
        if isinstance(outcome, FetchSuccess):
            return outcome.payload
        if isinstance(outcome, UpstreamFailure):
            raise UpstreamServiceError(series_id, outcome.status_code, outcome.details)
        raise UpstreamTransportError(outcome.message)

    async def get_many(
        self,
        series_ids: list[str] | None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict[str, Any]:
        """Fetch several series concurrently.

        Only the upfront validation can fail the whole call. After fan-out,
        each identifier gets either its payload or an error descriptor, and a
        failing identifier never affects its siblings. Blank identifiers are
        skipped and duplicates (after trimming) are fetched once.
        """
        if not series_ids or not isinstance(series_ids, list):
            raise ClientInputError("Missing or invalid series array in request body")
        self._require_credential()

        trimmed = (s.strip() for s in series_ids if isinstance(s, str))
        wanted = list(dict.fromkeys(s for s in trimmed if s))
        logger.info("batch.request", series=wanted, skipped=len(series_ids) - len(wanted))

        # Shielded: cancelling the batch leaves its fetches running to completion.
        tasks = [asyncio.ensure_future(self._lookup_pair(sid, start_date, end_date)) for sid in wanted]
        for task in tasks:
            self._pending.add(task)
            task.add_done_callback(self._pending.discard)
        results = await asyncio.gather(
            *(asyncio.shield(task) for task in tasks),
            return_exceptions=True,
        )

        batch: dict[str, Any] = {}
        failed = 0
        for sid, result in zip(wanted, results):
            if isinstance(result, BaseException):
                logger.error("batch.task_failed", series_id=sid, error=str(result))
                result = (sid, TransportFailure(str(result) or result.__class__.__name__))
            _, outcome = result
            if isinstance(outcome, FetchSuccess):
                batch[sid] = outcome.payload
            else:
                failed += 1
                batch[sid] = outcome.to_descriptor(sid)

        logger.info("batch.completed", requested=len(wanted), failed=failed)
        return batch

    async def _lookup_pair(
        self, series_id: str, start_date: str | None, end_date: str | None
    ) -> tuple[str, FetchOutcome]:
        return series_id, await self._lookup(series_id, start_date, end_date, BATCH_SORT_ORDER)

    async def _lookup(
        self,
        series_id: str,
        start_date: str | None,
        end_date: str | None,
        sort_order: str,
    ) -> FetchOutcome:
        key = cache_key(series_id, start_date, end_date)

        entry = self._cache.get_fresh(key)
        if entry is not None:
            logger.info("cache.hit", series_id=series_id, key=key)
            return FetchSuccess(entry.payload)

        # Miss or stale: fetch from upstream
        logger.info("cache.miss", series_id=series_id, key=key)
        outcome = await self._provider.fetch_observations(series_id, start_date, end_date, sort_order)

        if isinstance(outcome, FetchSuccess):
            self._cache.put(key, outcome.payload)
            logger.info("cache.stored", series_id=series_id, key=key)
        return outcome

    def _require_credential(self) -> None:
        if not self._provider.configured:
            logger.error("config.missing_api_key", provider=self._provider.name)
            raise ConfigurationError()
