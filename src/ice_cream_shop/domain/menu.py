"""Menu enumerations for the ice cream shop."""

from enum import Enum, IntEnum


class ConeType(Enum):
    """Vessel an ice cream dish is served in."""

    CUP = "cup"
    BISCUIT = "biscuit"


class PortionSize(IntEnum):
    """Portion size; the value is the number of flavors a cone can hold."""

    SMALL = 1
    MEDIUM = 2
    LARGE = 3

    @property
    def capacity(self) -> int:
        """Maximum number of ice cream balls for this portion."""
        return int(self)


class Flavor(Enum):
    """Ice cream flavors."""

    CHOCOLATE = "chocolate"
    VANILLA = "vanilla"
    STRAWBERRY = "strawberry"


class Topping(Enum):
    """Toppings added on top of the flavors."""

    SPRINKLES = "sprinkles"
    CANDIES = "candies"
    HOT_FUDGE = "hot_fudge"
    GUMMY_BEARS = "gummy_bears"


_NON_VEGAN_FLAVORS = frozenset({Flavor.CHOCOLATE})


def is_vegan_flavor(flavor: Flavor) -> bool:
    """Return True when the flavor contains no dairy."""
    return flavor not in _NON_VEGAN_FLAVORS
