"""Order fulfillment for the ice cream shop."""

import logging
from dataclasses import dataclass
from typing import Protocol

from ice_cream_shop.domain.dishes import Cone, IceCreamDish
from ice_cream_shop.domain.errors import OutOfStockError
from ice_cream_shop.domain.menu import ConeType, Flavor, PortionSize
from ice_cream_shop.domain.orders import Order

_logger = logging.getLogger(__name__)


class IceCreamStock(Protocol):
    """Inventory interface supplying cones and flavors."""

    def grab_cone(self, cone_type: ConeType, portion_size: PortionSize) -> Cone:
        """Return an empty cone of the requested type and size."""

    def has_flavor_available(self, flavor: Flavor) -> bool:
        """Return whether a ball of the flavor can be served."""


class BillingSystem(Protocol):
    """Billing interface charged for every fulfilled order."""

    def charge(self, order: Order) -> None:
        """Charge the customer for the order."""


@dataclass
class IceCreamShop:
    """Application service that turns orders into dishes."""

    stock: IceCreamStock
    billing_system: BillingSystem

    def submit(self, order: Order) -> IceCreamDish:
        """Prepare the dish, charge for the order and hand the dish over.

        Any rejection aborts the order before billing; errors raised by the
        billing system reach the caller unchanged.
        """
        dish = self._prepare_dish(order)
        self.billing_system.charge(order)
        _logger.info(
            "Order charged: cone=%s size=%s flavors=%s toppings=%s",
            order.cone_type.value,
            order.portion_size.name.lower(),
            len(dish.flavors),
            len(dish.toppings),
        )
        return dish

    def _prepare_dish(self, order: Order) -> IceCreamDish:
        cone = self.stock.grab_cone(order.cone_type, order.portion_size)
        dish = IceCreamDish(cone=cone, is_vegan=order.is_vegan)
        for flavor in order.flavors:
            if not self.stock.has_flavor_available(flavor):
                raise OutOfStockError(flavor)
            dish.add_flavor(flavor)

        # Toppings are not tracked by the stock.
        for topping in order.toppings or ():
            dish.add_topping(topping)
        return dish
