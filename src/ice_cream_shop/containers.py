"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from ice_cream_shop.adapters.billing_client import HttpxBillingSystem
from ice_cream_shop.adapters.in_memory_stock import InMemoryIceCreamStock
from ice_cream_shop.adapters.ledger_billing import LedgerBillingSystem
from ice_cream_shop.config import Settings, parse_flavor_stock
from ice_cream_shop.services.shop import BillingSystem, IceCreamShop, IceCreamStock


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    stock: IceCreamStock
    billing_system: BillingSystem
    shop: IceCreamShop
    close_resources: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    stock = InMemoryIceCreamStock(
        parse_flavor_stock(
            resolved_settings.flavor_stock, resolved_settings.default_scoops
        )
    )
    billing_system: BillingSystem
    if resolved_settings.billing_url:
        http_billing = HttpxBillingSystem.create(
            resolved_settings.billing_url,
            timeout_seconds=resolved_settings.billing_timeout_seconds,
        )
        billing_system = http_billing

        def close_resources() -> None:
            http_billing.close()

    else:
        billing_system = LedgerBillingSystem()

        def close_resources() -> None:
            return None

    return AppContainer(
        settings=resolved_settings,
        stock=stock,
        billing_system=billing_system,
        shop=IceCreamShop(stock=stock, billing_system=billing_system),
        close_resources=close_resources,
    )
