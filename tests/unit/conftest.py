"""Shared test helpers — a scripted SeriesProvider and a controllable clock."""
import asyncio

import pytest

from fred_proxy.core.data.providers.base import FetchSuccess, SeriesProvider


class StubProvider(SeriesProvider):
    """Test helper — returns scripted outcomes per series id and records every call."""

    def __init__(self, responses: dict | None = None, configured: bool = True, delay: float = 0.0):
        self.responses = responses or {}
        self._configured = configured
        self.delay = delay
        self.calls: list[tuple] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def name(self) -> str:
        return "stub"

    @property
    def configured(self) -> bool:
        return self._configured

    async def fetch_observations(self, series_id, start_date=None, end_date=None, sort_order="desc"):
        self.calls.append((series_id, start_date, end_date, sort_order))
        # A list scripts one outcome per call, taken when the call starts.
        scripted = self.responses.get(series_id)
        if isinstance(scripted, list):
            scripted = scripted.pop(0)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            outcome = scripted if scripted is not None else FetchSuccess(
                {"series_id": series_id, "observations": []}
            )
            if isinstance(outcome, Exception):
                raise outcome
            return outcome
        finally:
            self.in_flight -= 1


class FakeClock:

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def make_provider():
    """Factory for StubProvider instances."""
    return StubProvider


@pytest.fixture
def clock():
    return FakeClock()
