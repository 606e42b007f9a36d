from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from price_proxy.models.api import TierSearchResponse
from price_proxy.services.lcsc import LcscPriceService
from price_proxy.utils.errors import FetchError, PriceDataNotFoundError, UpstreamStatusError

log = structlog.get_logger()

router = APIRouter(prefix="/search-lcsc")


@lru_cache
def get_price_service() -> LcscPriceService:
    return LcscPriceService()


def _require_part(part: str | None) -> str:
    part = (part or "").strip()
    if not part:
        log.warning("missing_part_parameter")
        raise HTTPException(status_code=400, detail="'part' query parameter is required")
    return part


def _upstream_http_error(e: UpstreamStatusError) -> HTTPException:
    # Echo client/server errors from LCSC; anything else is a bad gateway
    status_code = e.status_code if e.status_code >= 400 else 502
    return HTTPException(status_code=status_code, detail=str(e))


@router.get("", response_class=PlainTextResponse)
async def search_lcsc(
    part: str | None = Query(default=None, description="LCSC part number, e.g. C85934"),
    service: LcscPriceService = Depends(get_price_service),
) -> PlainTextResponse:
    part = _require_part(part)
    try:
        text = await service.lookup_text(part)
    except FetchError:
        raise HTTPException(status_code=502, detail="Failed to fetch data from LCSC")
    except UpstreamStatusError as e:
        raise _upstream_http_error(e)
    except PriceDataNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return PlainTextResponse(text)


@router.get("/tiers", response_model=TierSearchResponse)
async def search_lcsc_tiers(
    part: str | None = Query(default=None, description="LCSC part number, e.g. C85934"),
    service: LcscPriceService = Depends(get_price_service),
) -> TierSearchResponse:
    part = _require_part(part)
    try:
        return await service.lookup(part)
    except FetchError:
        raise HTTPException(status_code=502, detail="Failed to fetch data from LCSC")
    except UpstreamStatusError as e:
        raise _upstream_http_error(e)
