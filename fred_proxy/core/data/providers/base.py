"""Abstract SeriesProvider — upstream time-series sources implement this."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FetchSuccess:
    payload: Any


@dataclass(frozen=True)
class UpstreamFailure:
    """Upstream answered with a non-2xx status."""
    status_code: int
    details: Any

    def to_descriptor(self, series_id: str) -> dict:
        return {"error": f"Failed to fetch {series_id}", "status": self.status_code, "details": self.details}


@dataclass(frozen=True)
class TransportFailure:
    """Upstream could not be reached or its response could not be decoded."""
    message: str

    def to_descriptor(self, series_id: str) -> dict:
        return {"error": f"Internal error fetching {series_id}", "message": self.message}


FetchOutcome = FetchSuccess | UpstreamFailure | TransportFailure


class SeriesProvider(ABC):

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique key: 'fred'"""
        ...

    @property
    @abstractmethod
    def configured(self) -> bool:
        """True when the provider holds the credential it needs to be called."""
        ...

    @abstractmethod
    async def fetch_observations(
        self,
        series_id: str,
        start_date: str | None = None,
        end_date: str | None = None,
        sort_order: str = "desc",
    ) -> FetchOutcome:
        """
        Fetch observations for one series. Failures are returned as
        UpstreamFailure / TransportFailure, never raised.
        """
        ...
