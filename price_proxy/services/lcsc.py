from urllib.parse import quote

import structlog

from price_proxy.config.settings import Settings, get_settings
from price_proxy.models.api import TierSearchResponse
from price_proxy.models.pricing import ExtractionResult
from price_proxy.models.scraping import FetchOptions
from price_proxy.scraping.exporter.text_exporter import export_to_text
from price_proxy.scraping.fetcher.http_fetcher import HttpFetcher
from price_proxy.scraping.parser.price_detector import get_price_strategy
from price_proxy.scraping.parser.table_locator import class_contains
from price_proxy.scraping.parser.tier_parser import TierPriceParser
from price_proxy.utils.errors import PriceDataNotFoundError, UpstreamStatusError

log = structlog.get_logger()


class LcscPriceService:
    """Looks up the quantity price breaks of an LCSC part."""

    def __init__(
        self,
        settings: Settings | None = None,
        fetcher: HttpFetcher | None = None,
        parser: TierPriceParser | None = None,
    ):
        self.settings = settings or get_settings()
        self.fetcher = fetcher or HttpFetcher()
        self.parser = parser or TierPriceParser(
            table_predicate=class_contains(self.settings.price_table_class),
            price_strategy=get_price_strategy(self.settings.price_strategy),
        )
        self.log = log.bind(service="LcscPriceService")

    def product_url(self, part: str) -> str:
        return self.settings.lcsc_product_url.format(part=quote(part, safe=""))

    async def lookup(self, part: str) -> TierSearchResponse:
        """Fetch the product page for ``part`` and extract its price tiers."""
        url = self.product_url(part)
        self.log.info("lookup_started", part=part, url=url)

        result = await self.fetcher.fetch(
            url,
            FetchOptions(
                timeout=self.settings.fetch_timeout_ms,
                max_retries=self.settings.fetch_max_retries,
            ),
        )
        if result.status_code != 200:
            self.log.warning(
                "upstream_bad_status",
                part=part,
                status_code=result.status_code,
                body=result.html[:500],
            )
            raise UpstreamStatusError(
                f"LCSC returned status {result.status_code}",
                status_code=result.status_code,
                part=part,
                url=url,
            )

        extraction = self.parser.extract_html(result.html, part=part)
        return self._to_response(part, url, extraction)

    async def lookup_text(self, part: str) -> str:
        """Return the formatted tier string, raising when no data was found."""
        response = await self.lookup(part)
        if not response.formatted:
            self.log.warning("price_data_not_found", part=part, status=response.status.value)
            raise PriceDataNotFoundError(
                "Price data not found or empty",
                status=response.status.value,
                part=part,
                url=response.url,
            )
        self.log.info("lookup_complete", part=part, tiers=len(response.tiers))
        return response.formatted

    def _to_response(self, part: str, url: str, extraction: ExtractionResult) -> TierSearchResponse:
        return TierSearchResponse(
            part=part,
            url=url,
            status=extraction.status,
            tiers=extraction.tiers,
            formatted=export_to_text(extraction),
            diagnostics=extraction.diagnostics,
        )
