"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from ice_cream_shop.app_logging import DEFAULT_LOG_FORMAT
from ice_cream_shop.domain.menu import Flavor

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    flavor_stock: str | None = None
    default_scoops: int = 20
    billing_url: str | None = None
    billing_timeout_seconds: float = 10
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_flavor_stock(raw: str | None, default_scoops: int = 0) -> dict[Flavor, int]:
    """Parse per-flavor scoop counts such as ``vanilla=5,chocolate=3``."""
    scoops = {flavor: default_scoops for flavor in Flavor}
    if raw is None:
        return scoops
    for chunk in raw.split(","):
        name, _, count = chunk.partition("=")
        name = name.strip().lower()
        count = count.strip()
        if not name or not (count.isascii() and count.isdigit()):
            continue
        try:
            flavor = Flavor(name)
        except ValueError:
            continue
        scoops[flavor] = int(count)
    return scoops
