"""Pydantic models for the orders API."""

from pydantic import BaseModel, Field, field_validator

from ice_cream_shop.domain.dishes import IceCreamDish
from ice_cream_shop.domain.menu import ConeType, Flavor, PortionSize, Topping
from ice_cream_shop.domain.orders import Order


class OrderRequest(BaseModel):
    """Order payload submitted by a customer."""

    is_vegan: bool = False
    cone_type: ConeType
    portion_size: PortionSize
    flavors: list[Flavor] = Field(default_factory=list)
    toppings: list[Topping] = Field(default_factory=list)

    @field_validator("portion_size", mode="before")
    @classmethod
    def portion_size_by_name(cls, value: object) -> object:
        """Accept portion sizes by lower-case name, e.g. ``"medium"``."""
        if not isinstance(value, str):
            return value
        try:
            return PortionSize[value.upper()]
        except KeyError:
            names = ", ".join(size.name.lower() for size in PortionSize)
            raise ValueError(f"portion_size must be one of: {names}") from None

    def to_order(self) -> Order:
        return Order(
            is_vegan=self.is_vegan,
            cone_type=self.cone_type,
            portion_size=self.portion_size,
            flavors=tuple(self.flavors),
            toppings=tuple(self.toppings),
        )


class DishResponse(BaseModel):
    """Prepared dish returned to the customer."""

    cone_type: ConeType
    portion_size: str
    is_vegan: bool
    flavors: list[Flavor]
    toppings: list[Topping]

    @classmethod
    def from_dish(cls, dish: IceCreamDish) -> "DishResponse":
        return cls(
            cone_type=dish.cone.cone_type,
            portion_size=dish.cone.portion_size.name.lower(),
            is_vegan=dish.is_vegan,
            flavors=list(dish.flavors),
            toppings=list(dish.toppings),
        )
