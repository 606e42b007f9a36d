from pydantic import BaseModel, Field

from price_proxy.config.constants import DEFAULT_FETCH_TIMEOUT


class FetchResult(BaseModel):
    url: str
    status_code: int
    html: str
    headers: dict[str, str] = {}
    duration_ms: int
    attempts: int = 1


class FetchOptions(BaseModel):
    timeout: int = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0)
    max_retries: int = Field(default=0, ge=0)
    headers: dict[str, str] = {}
