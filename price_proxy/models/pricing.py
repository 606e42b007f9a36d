from enum import StrEnum
from typing import Any

from pydantic import BaseModel


class ExtractionStatus(StrEnum):
    FOUND = "found"
    FOUND_EMPTY = "found_empty"
    NOT_FOUND = "not_found"


class Diagnostic(BaseModel):
    """A structured event raised while extracting prices."""

    event: str
    level: str = "info"
    context: dict[str, Any] = {}


class PriceTier(BaseModel):
    tier: str
    price: str


class ExtractionResult(BaseModel):
    status: ExtractionStatus
    tiers: list[PriceTier] = []
    diagnostics: list[Diagnostic] = []

    @property
    def found(self) -> bool:
        return self.status == ExtractionStatus.FOUND
