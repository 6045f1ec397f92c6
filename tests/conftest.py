"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from ice_cream_shop.config import Settings
from ice_cream_shop.containers import AppContainer
from ice_cream_shop.domain.dishes import Cone
from ice_cream_shop.domain.menu import ConeType, Flavor, PortionSize
from ice_cream_shop.domain.orders import Order
from ice_cream_shop.services.shop import BillingSystem, IceCreamShop, IceCreamStock


class BillingDeclinedError(Exception):
    """Raised by the failing billing fake."""


@dataclass
class FakeIceCreamStock(IceCreamStock):
    """Stock fake with an optional shared scoop budget across all flavors."""

    scoops: int | None = None
    cones: list[tuple[ConeType, PortionSize]] = field(default_factory=list)
    queried: list[Flavor] = field(default_factory=list)

    def grab_cone(self, cone_type: ConeType, portion_size: PortionSize) -> Cone:
        self.cones.append((cone_type, portion_size))
        return Cone(cone_type=cone_type, portion_size=portion_size)

    def has_flavor_available(self, flavor: Flavor) -> bool:
        self.queried.append(flavor)
        if self.scoops is None:
            return True
        self.scoops -= 1
        return self.scoops >= 0


@dataclass
class RecordingBillingSystem(BillingSystem):
    """Billing fake that records charged orders."""

    charges: list[Order] = field(default_factory=list)

    def charge(self, order: Order) -> None:
        self.charges.append(order)


@dataclass
class FailingBillingSystem(BillingSystem):
    """Billing fake that declines every charge."""

    attempts: int = 0

    def charge(self, order: Order) -> None:
        self.attempts += 1
        raise BillingDeclinedError("card declined")


@pytest.fixture
def settings() -> Settings:
    return Settings(flavor_stock="vanilla=2,strawberry=1", default_scoops=0)


@pytest.fixture
def stock() -> FakeIceCreamStock:
    return FakeIceCreamStock()


@pytest.fixture
def billing_system() -> RecordingBillingSystem:
    return RecordingBillingSystem()


@pytest.fixture
def shop(
    stock: FakeIceCreamStock, billing_system: RecordingBillingSystem
) -> IceCreamShop:
    return IceCreamShop(stock=stock, billing_system=billing_system)


@pytest.fixture
def container(
    settings: Settings,
    stock: FakeIceCreamStock,
    billing_system: RecordingBillingSystem,
    shop: IceCreamShop,
) -> AppContainer:
    def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        stock=stock,
        billing_system=billing_system,
        shop=shop,
        close_resources=close_resources,
    )
