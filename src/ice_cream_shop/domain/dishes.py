"""Cone and dish entities assembled while fulfilling an order."""

from dataclasses import dataclass, field

from ice_cream_shop.domain.errors import (
    FlavorAfterToppingError,
    PortionSizeError,
    VeganMismatchError,
)
from ice_cream_shop.domain.menu import (
    ConeType,
    Flavor,
    PortionSize,
    Topping,
    is_vegan_flavor,
)


@dataclass
class Cone:
    """A cup or biscuit holding flavors with toppings on top."""

    cone_type: ConeType
    portion_size: PortionSize
    flavors: list[Flavor] = field(default_factory=list)
    toppings: list[Topping] = field(default_factory=list)

    @property
    def max_flavors(self) -> int:
        """Number of flavors the portion size allows."""
        return self.portion_size.capacity

    def add_flavor(self, flavor: Flavor) -> None:
        """Put another ball on the cone.

        The flavor is appended before the capacity check, so an overflowing
        cone already holds the extra ball when PortionSizeError is raised.
        """
        if self.toppings:
            raise FlavorAfterToppingError
        self.flavors.append(flavor)
        if len(self.flavors) > self.max_flavors:
            raise PortionSizeError

    def add_topping(self, topping: Topping) -> None:
        """Add a topping; toppings are never rejected."""
        self.toppings.append(topping)


@dataclass
class IceCreamDish:
    """The product handed to the customer."""

    cone: Cone
    is_vegan: bool

    @property
    def flavors(self) -> list[Flavor]:
        return self.cone.flavors

    @property
    def toppings(self) -> list[Topping]:
        return self.cone.toppings

    @property
    def is_sealed(self) -> bool:
        """True once a topping blocks further flavors."""
        return bool(self.cone.toppings)

    def add_flavor(self, flavor: Flavor) -> None:
        """Add a flavor, rejecting dairy on vegan dishes before it is recorded."""
        if self.is_vegan and not is_vegan_flavor(flavor):
            raise VeganMismatchError
        self.cone.add_flavor(flavor)

    def add_topping(self, topping: Topping) -> None:
        self.cone.add_topping(topping)
