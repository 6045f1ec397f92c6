"""Order value and the fluent builder used to assemble one."""

from dataclasses import dataclass, field

from ice_cream_shop.domain.menu import ConeType, Flavor, PortionSize, Topping


@dataclass(frozen=True)
class Order:
    """Customer order as submitted to the shop."""

    is_vegan: bool
    cone_type: ConeType
    portion_size: PortionSize
    flavors: tuple[Flavor, ...]
    toppings: tuple[Topping, ...] = ()


@dataclass(frozen=True)
class OrderBuilder:
    """First builder stage: fixes the dietary flag, then asks for a cone."""

    is_vegan: bool = False

    @classmethod
    def vegan(cls) -> "OrderBuilder":
        return cls(is_vegan=True)

    def cone(self, cone_type: ConeType, portion_size: PortionSize) -> "OrderDraft":
        """Pick the cone and move on to flavors and toppings."""
        return OrderDraft(
            is_vegan=self.is_vegan, cone_type=cone_type, portion_size=portion_size
        )


@dataclass
class OrderDraft:
    """Second builder stage collecting flavors and toppings.

    Nothing is validated here; the shop rejects invalid orders on submit.
    """

    is_vegan: bool
    cone_type: ConeType
    portion_size: PortionSize
    flavors: list[Flavor] = field(default_factory=list)
    toppings: list[Topping] = field(default_factory=list)

    def flavor(self, *flavors: Flavor) -> "OrderDraft":
        self.flavors.extend(flavors)
        return self

    def topping(self, *toppings: Topping) -> "OrderDraft":
        self.toppings.extend(toppings)
        return self

    def build(self) -> Order:
        """Freeze the draft into an Order."""
        return Order(
            is_vegan=self.is_vegan,
            cone_type=self.cone_type,
            portion_size=self.portion_size,
            flavors=tuple(self.flavors),
            toppings=tuple(self.toppings),
        )
