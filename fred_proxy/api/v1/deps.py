"""Request-scoped access to the collaborators built by the app factory."""
from fastapi import Request

from fred_proxy.core.data.service import SeriesService


def get_series_service(request: Request) -> SeriesService:
    return request.app.state.series_service
