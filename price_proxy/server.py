from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI

from price_proxy.api.router import api_router
from price_proxy.config.settings import get_settings
from price_proxy.utils.logger import setup_logging
from price_proxy.version import __version__

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    setup_logging()
    settings = get_settings()
    log.info("server_starting", host=settings.host, port=settings.port, version=__version__)
    yield
    log.info("server_stopped")


app = FastAPI(
    title="LCSC Price Proxy",
    version=__version__,
    description="Extracts quantity price breaks from LCSC product pages for spreadsheet lookups",
    lifespan=lifespan,
)

# Routes are served at the root; the spreadsheet macro calls /search-lcsc directly
app.include_router(api_router)


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "price_proxy.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level,
    )
