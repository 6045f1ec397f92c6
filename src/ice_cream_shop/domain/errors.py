"""Domain errors raised while preparing an ice cream dish."""

from ice_cream_shop.domain.menu import Flavor


class IceCreamShopError(Exception):
    """Base class for order rejections."""

    code = "order_rejected"


class VeganMismatchError(IceCreamShopError):
    code = "vegan_mismatch"

    def __init__(self) -> None:
        super().__init__("Cannot add non-vegan type to vegan ice cream.")


class FlavorAfterToppingError(IceCreamShopError):
    code = "flavor_after_topping"

    def __init__(self) -> None:
        super().__init__("Cannot add flavor after topping was added.")


class PortionSizeError(IceCreamShopError):
    code = "portion_size_exceeded"

    def __init__(self) -> None:
        super().__init__("No more space for another ice cream ball.")


class OutOfStockError(IceCreamShopError):
    """Raised when the stock reports a flavor as unavailable."""

    code = "out_of_stock"

    def __init__(self, flavor: Flavor | None = None) -> None:
        super().__init__("Out of stock.")
        self.flavor = flavor
