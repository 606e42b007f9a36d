from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from price_proxy.config.constants import (
    DEFAULT_FETCH_TIMEOUT,
    DEFAULT_PRICE_STRATEGY,
    DEFAULT_PRICE_TABLE_CLASS,
)


class Settings(BaseSettings):
    port: int = 3666
    host: str = "0.0.0.0"
    debug: bool = False
    log_level: str = "info"
    log_json: bool = False

    lcsc_product_url: str = "https://www.lcsc.com/product-detail/{part}.html"
    fetch_timeout_ms: int = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0)
    fetch_max_retries: int = Field(default=2, ge=0)

    # Extraction policy
    price_table_class: str = DEFAULT_PRICE_TABLE_CLASS
    price_strategy: str = DEFAULT_PRICE_STRATEGY

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("lcsc_product_url")
    @classmethod
    def require_part_placeholder(cls, value: str) -> str:
        if "{part}" not in value:
            raise ValueError("lcsc_product_url must contain a {part} placeholder")
        return value

    @field_validator("price_strategy")
    @classmethod
    def normalize_strategy(cls, value: str) -> str:
        return value.strip().lower()


@lru_cache
def get_settings() -> Settings:
    return Settings()
