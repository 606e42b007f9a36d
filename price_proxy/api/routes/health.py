from fastapi import APIRouter

from price_proxy.models.api import HealthResponse
from price_proxy.version import __version__

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)
