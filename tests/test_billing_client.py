"""Tests for the HTTP billing adapter."""

import json

import httpx
import pytest

from ice_cream_shop.adapters.billing_client import HttpxBillingSystem, order_payload
from ice_cream_shop.adapters.in_memory_stock import InMemoryIceCreamStock
from ice_cream_shop.domain.menu import ConeType, Flavor, PortionSize, Topping
from ice_cream_shop.domain.orders import Order
from ice_cream_shop.services.shop import IceCreamShop

_ORDER = Order(
    is_vegan=True,
    cone_type=ConeType.BISCUIT,
    portion_size=PortionSize.MEDIUM,
    flavors=(Flavor.VANILLA, Flavor.STRAWBERRY),
    toppings=(Topping.GUMMY_BEARS,),
)


def test_order_payload_uses_lowercase_names() -> None:
    assert order_payload(_ORDER) == {
        "is_vegan": True,
        "cone_type": "biscuit",
        "portion_size": "medium",
        "flavors": ["vanilla", "strawberry"],
        "toppings": ["gummy_bears"],
    }


def test_billing_client_posts_charge() -> None:
    seen: list[tuple[str, dict[str, object]]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.url.path, json.loads(request.content.decode())))
        return httpx.Response(201, json={"status": "charged"})

    client = HttpxBillingSystem(
        base_url="https://billing.test",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )

    client.charge(_ORDER)
    client.close()

    assert seen == [("/charges", order_payload(_ORDER))]


def test_billing_error_reaches_shop_caller() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(402, json={"error": "payment required"})

    billing = HttpxBillingSystem(
        base_url="https://billing.test",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    shop = IceCreamShop(
        stock=InMemoryIceCreamStock({Flavor.VANILLA: 5, Flavor.STRAWBERRY: 5}),
        billing_system=billing,
    )

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        shop.submit(_ORDER)

    assert excinfo.value.response.status_code == 402


def test_create_strips_trailing_slash() -> None:
    client = HttpxBillingSystem.create("https://billing.test/", timeout_seconds=3)

    assert client.base_url == "https://billing.test"
    assert client.timeout_seconds == 3
    client.close()
