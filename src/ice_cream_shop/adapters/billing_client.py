"""Remote billing API client adapter."""

from dataclasses import dataclass

import httpx

from ice_cream_shop.domain.orders import Order
from ice_cream_shop.services.shop import BillingSystem


def order_payload(order: Order) -> dict[str, object]:
    """Serialize an order into a JSON-ready payload."""
    return {
        "is_vegan": order.is_vegan,
        "cone_type": order.cone_type.value,
        "portion_size": order.portion_size.name.lower(),
        "flavors": [flavor.value for flavor in order.flavors],
        "toppings": [topping.value for topping in order.toppings or ()],
    }


@dataclass
class HttpxBillingSystem(BillingSystem):
    """Billing system that posts charges to a remote billing API."""

    base_url: str
    http_client: httpx.Client
    timeout_seconds: float = 10

    @classmethod
    def create(
        cls, base_url: str, timeout_seconds: float = 10
    ) -> "HttpxBillingSystem":
        """Create a billing client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.Client(),
            timeout_seconds=timeout_seconds,
        )

    def charge(self, order: Order) -> None:
        """Post the order to the charges endpoint."""
        response = self.http_client.post(
            f"{self.base_url}/charges",
            json=order_payload(order),
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.http_client.close()
