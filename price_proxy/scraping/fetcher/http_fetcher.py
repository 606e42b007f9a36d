import asyncio
import time

import httpx
import structlog

from price_proxy.models.scraping import FetchOptions, FetchResult
from price_proxy.utils.errors import FetchError

log = structlog.get_logger()


class HttpFetcher:
    """Downloads product pages with httpx using browser-like headers."""

    DEFAULT_HEADERS = {
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        ),
        "Accept": (
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "image/webp,image/apng,*/*;q=0.8"
        ),
        "Accept-Language": "en-US,en;q=0.9",
    }

    # Backoff between attempts on transport errors, in seconds
    BASE_DELAY = 0.5
    MAX_DELAY = 10.0

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        self.transport = transport

    async def fetch(self, url: str, options: FetchOptions | None = None) -> FetchResult:
        options = options or FetchOptions()
        start = time.time()
        response, attempts = await self._get_with_retries(url, options)
        duration_ms = int((time.time() - start) * 1000)
        log.info(
            "fetch_complete",
            url=url,
            status_code=response.status_code,
            attempts=attempts,
            duration_ms=duration_ms,
        )

        return FetchResult(
            url=url,
            status_code=response.status_code,
            html=response.text,
            headers=dict(response.headers),
            duration_ms=duration_ms,
            attempts=attempts,
        )

    async def _get_with_retries(self, url: str, options: FetchOptions) -> tuple[httpx.Response, int]:
        """GET ``url``, retrying connection-level failures with exponential backoff.

        HTTP error statuses are returned as they are; only transport errors
        (refused connections, timeouts, resets) are retried.
        """
        timeout = options.timeout / 1000  # ms to seconds
        headers = {**self.DEFAULT_HEADERS, **options.headers}
        total_attempts = options.max_retries + 1

        async with httpx.AsyncClient(
            follow_redirects=True,
            timeout=timeout,
            headers=headers,
            transport=self.transport,
        ) as client:
            for attempt in range(1, total_attempts + 1):
                try:
                    return await client.get(url), attempt
                except httpx.TransportError as e:
                    if attempt == total_attempts:
                        log.error("fetch_failed", url=url, attempts=attempt, error=str(e))
                        raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e
                    delay = min(self.BASE_DELAY * (2 ** (attempt - 1)), self.MAX_DELAY)
                    log.warning(
                        "fetch_retry",
                        url=url,
                        attempt=attempt,
                        max_retries=options.max_retries,
                        delay=delay,
                        error=str(e),
                    )
                    await asyncio.sleep(delay)
                except httpx.HTTPError as e:
                    log.error("fetch_failed", url=url, attempts=attempt, error=str(e))
                    raise FetchError(f"Failed to fetch {url}: {e}", url=url) from e

        raise AssertionError("unreachable")
