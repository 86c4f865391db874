"""FRED (Federal Reserve Economic Data) provider — series observations."""
import asyncio
import json

import aiohttp
import structlog
from aiolimiter import AsyncLimiter

from fred_proxy.core.data.providers.base import (
    FetchOutcome,
    FetchSuccess,
    SeriesProvider,
    TransportFailure,
    UpstreamFailure,
)

FRED_BASE = "https://api.stlouisfed.org/fred"
OBSERVATIONS_ENDPOINT = "/series/observations"

logger = structlog.get_logger()


class FREDProvider(SeriesProvider):

    def __init__(self, api_key: str = "", base_url: str = FRED_BASE, requests_per_minute: int = 120):
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._limiter = AsyncLimiter(requests_per_minute, 60)  # FRED allows 120 requests per minute

    @property
    def name(self) -> str:
        return "fred"

    @property
    def configured(self) -> bool:
        return bool(self._api_key)

    async def fetch_observations(
        self,
        series_id: str,
        start_date: str | None = None,
        end_date: str | None = None,
        sort_order: str = "desc",
    ) -> FetchOutcome:
        url = f"{self._base_url}{OBSERVATIONS_ENDPOINT}"
        params = {
            "series_id": series_id,
            "api_key": self._api_key,
            "file_type": "json",
            "sort_order": sort_order,
        }
        if start_date:
            params["observation_start"] = start_date
        if end_date:
            params["observation_end"] = end_date

        # api_key stays out of the logs
        logger.info(
            "fred.request",
            series_id=series_id,
            start_date=start_date,
            end_date=end_date,
            sort_order=sort_order,
        )

        try:
            async with self._limiter:
                async with aiohttp.ClientSession() as session:
                    async with session.get(url, params=params) as resp:
                        if not 200 <= resp.status < 300:
                            error_text = await resp.text()
                            logger.error(
                                "fred.upstream_error",
                                series_id=series_id,
                                status=resp.status,
                                body=error_text,
                            )
                            return UpstreamFailure(resp.status, _parse_details(error_text))
                        data = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            message = str(e) or e.__class__.__name__
            logger.error("fred.transport_error", series_id=series_id, error=message)
            return TransportFailure(message)

        return FetchSuccess(data)


def _parse_details(text: str):
    """Best-effort JSON decode of an upstream error body; raw text otherwise."""
    try:
        return json.loads(text)
    except ValueError:
        return text
