"""Entry point — run with: python -m fred_proxy.main"""
import uvicorn

from fred_proxy.api.v1.app import app  # noqa: F401
from fred_proxy.core.config import settings

if __name__ == "__main__":
    uvicorn.run("fred_proxy.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
