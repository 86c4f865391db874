"""Pydantic request/response models."""
from __future__ import annotations

from pydantic import BaseModel


class BatchSeriesRequest(BaseModel):
    series: list[str] | None = None
    start_date: str | None = None
    end_date: str | None = None


class HealthStatus(BaseModel):
    status: str = "ok"
    timestamp: str
    cache_size: int
    credential_configured: bool
    note: str


class CacheCleared(BaseModel):
    message: str = "Cache cleared successfully"
    cache_size: int
