"""Data layer — cache-first access to FRED series.

Design: every series request goes through a SeriesService, which owns a
SeriesCache and an upstream SeriesProvider.  The in-memory cache is checked
first; only on a miss (or an entry older than the 5 minute TTL) does it hit
the remote API.  This means:
  • Repeated dashboard refreshes never hammer FRED for the same window.
  • Batch requests fan out concurrently, one task per series.
  • Services are built explicitly, so tests can run isolated instances.
"""

from fred_proxy.core.config import Settings
from fred_proxy.core.data.cache.memory_cache import SeriesCache
from fred_proxy.core.data.providers.base import SeriesProvider
from fred_proxy.core.data.providers.fred import FREDProvider
from fred_proxy.core.data.service import SeriesService


def build_provider(settings: Settings) -> SeriesProvider:
    """Return the FRED provider configured from settings."""
    return FREDProvider(
        api_key=settings.fred_api_key,
        base_url=settings.fred_base_url,
        requests_per_minute=settings.fred_requests_per_minute,
    )


def build_service(
    settings: Settings,
    cache: SeriesCache | None = None,
    provider: SeriesProvider | None = None,
) -> SeriesService:
    """Wire a SeriesService; injected collaborators win over settings."""
    return SeriesService(provider or build_provider(settings), cache)
