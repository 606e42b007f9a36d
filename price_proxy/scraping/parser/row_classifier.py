"""Turns the rows of a pricing table into tier/price pairs."""

from collections.abc import Iterator
from dataclasses import dataclass
from string import digits

from price_proxy.config.constants import (
    STANDARD_PACKAGING_PHRASE,
    THOUSANDS_SEPARATOR,
    TIER_SUFFIX,
)
from price_proxy.models.pricing import ExtractionResult, ExtractionStatus, PriceTier
from price_proxy.scraping.parser.diagnostics import DiagnosticLog
from price_proxy.scraping.parser.dom import Element
from price_proxy.scraping.parser.price_detector import PriceDetector
from price_proxy.scraping.parser.text_extractor import extract_text


@dataclass
class TierRow:
    tier: str
    price_cell: Element | None = None
    is_standard_packaging: bool = False


def normalize_tier(text: str) -> str:
    """Add the quantity suffix, or return "" when the text holds no quantity."""
    tier = text.replace(THOUSANDS_SEPARATOR, "")
    if not tier or tier.endswith(TIER_SUFFIX):
        return tier
    if any(ch in digits for ch in tier):
        return tier + TIER_SUFFIX
    return ""


def iter_rows(node: Element) -> Iterator[Element]:
    """Yield every ``tr`` below ``node`` in document order, nested ones included."""
    for element in node.iter_descendants():
        if element.tag == "tr":
            yield element


class RowClassifier:
    def __init__(self, detector: PriceDetector | None = None):
        self.detector = detector or PriceDetector()

    def classify_row(self, row: Element) -> TierRow | None:
        """Read the tier cell and price cell of a row. None means not a tier row."""
        tier_row: TierRow | None = None
        cell_index = 0
        for cell in row.iter_elements():
            if cell.tag != "td":
                continue
            cell_index += 1
            if cell_index == 1:
                text = extract_text(cell)
                if STANDARD_PACKAGING_PHRASE in text:
                    return TierRow(tier="", is_standard_packaging=True)
                tier_row = TierRow(tier=normalize_tier(text))
            elif cell_index == 2:
                tier_row.price_cell = cell

        if tier_row is None or not tier_row.tier or tier_row.price_cell is None:
            return None
        return tier_row

    def extract(self, table: Element, diagnostics: DiagnosticLog | None = None) -> ExtractionResult:
        diagnostics = diagnostics or DiagnosticLog()
        tiers: list[PriceTier] = []

        for row in iter_rows(table):
            tier_row = self.classify_row(row)
            if tier_row is None or tier_row.is_standard_packaging:
                continue
            price = self.detector.detect(tier_row.price_cell, diagnostics)
            if price is None:
                diagnostics.warning("tier_without_price", tier=tier_row.tier)
                continue
            tiers.append(PriceTier(tier=tier_row.tier, price=price))

        if not tiers:
            diagnostics.warning("empty_price_table", rows=sum(1 for _ in iter_rows(table)))
            return ExtractionResult(
                status=ExtractionStatus.FOUND_EMPTY,
                diagnostics=diagnostics.events,
            )

        return ExtractionResult(
            status=ExtractionStatus.FOUND,
            tiers=tiers,
            diagnostics=diagnostics.events,
        )
