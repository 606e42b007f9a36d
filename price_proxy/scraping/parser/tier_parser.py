"""Parser for extracting quantity price breaks from product detail pages."""

from price_proxy.models.pricing import ExtractionResult, ExtractionStatus
from price_proxy.scraping.parser.diagnostics import DiagnosticLog
from price_proxy.scraping.parser.dom import Element, parse_document
from price_proxy.scraping.parser.price_detector import PriceDetector, PriceStrategy, last_price
from price_proxy.scraping.parser.row_classifier import RowClassifier
from price_proxy.scraping.parser.table_locator import TablePredicate, class_contains, find_price_table


class TierPriceParser:
    """Locates the pricing table of a page and reads its quantity tiers."""

    def __init__(
        self,
        table_predicate: TablePredicate | None = None,
        price_strategy: PriceStrategy = last_price,
    ):
        self.table_predicate = table_predicate or class_contains()
        self.classifier = RowClassifier(PriceDetector(price_strategy))

    def extract(self, document: Element, **context: str) -> ExtractionResult:
        """Run the extraction over an already parsed document."""
        diagnostics = DiagnosticLog(**context)
        table = find_price_table(document, self.table_predicate)
        if table is None:
            diagnostics.warning("price_table_not_found")
            return ExtractionResult(
                status=ExtractionStatus.NOT_FOUND,
                diagnostics=diagnostics.events,
            )
        return self.classifier.extract(table, diagnostics)

    def extract_html(self, html: str, **context: str) -> ExtractionResult:
        return self.extract(parse_document(html), **context)
