from pydantic import BaseModel

from price_proxy.models.pricing import Diagnostic, ExtractionStatus, PriceTier


class HealthResponse(BaseModel):
    status: str
    version: str


class TierSearchResponse(BaseModel):
    part: str
    url: str
    status: ExtractionStatus
    tiers: list[PriceTier] = []
    formatted: str = ""
    diagnostics: list[Diagnostic] = []
