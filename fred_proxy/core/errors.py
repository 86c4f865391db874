"""Error taxonomy for the proxy.

Every error carries the HTTP status it maps to; the API layer turns them into
JSON responses (see ``fred_proxy.api.v1.errors``).
"""
from typing import Any


class ProxyError(Exception):
    """Base exception for fred-proxy."""

    status_code = 500

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ClientInputError(ProxyError):
    """Missing or invalid request parameters."""

    status_code = 400

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message)


class ConfigurationError(ProxyError):
    """The server is missing required configuration (the FRED API key)."""

    def __init__(self, message: str = "Server configuration error"):
        super().__init__(message)


class UpstreamServiceError(ProxyError):
    """FRED answered with a non-success status."""

    def __init__(self, series_id: str, status_code: int, details: Any = None):
        super().__init__(f"Failed to fetch data from FRED for series {series_id}", details)
        self.status_code = status_code


class UpstreamTransportError(ProxyError):
    """FRED could not be reached, or its response could not be read."""

    def __init__(self, message: str):
        super().__init__(message)
