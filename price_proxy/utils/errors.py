class ScrapeError(Exception):
    """Base exception for scraping errors."""

    def __init__(self, message: str, part: str = "", url: str = ""):
        self.part = part
        self.url = url
        super().__init__(message)


class FetchError(ScrapeError):
    """Raised when a page fetch fails after all retries."""


class UpstreamStatusError(ScrapeError):
    """Raised when the product page answers with a non-200 status."""

    def __init__(self, message: str, status_code: int = 0, **kwargs: str):
        self.status_code = status_code
        super().__init__(message, **kwargs)


class PriceDataNotFoundError(ScrapeError):
    """Raised when a page has no pricing table or the table holds no usable tiers."""

    def __init__(self, message: str, status: str = "", **kwargs: str):
        self.status = status
        super().__init__(message, **kwargs)
