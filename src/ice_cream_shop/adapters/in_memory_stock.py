"""In-memory ice cream stock."""

import threading
from dataclasses import dataclass, field

from ice_cream_shop.domain.dishes import Cone
from ice_cream_shop.domain.menu import ConeType, Flavor, PortionSize
from ice_cream_shop.services.shop import IceCreamStock


@dataclass
class InMemoryIceCreamStock(IceCreamStock):
    """Stock keeping a scoop counter per flavor.

    Cones are never short. Every successful availability check scoops one
    ball out of the tub, so a flavor ordered twice needs two scoops. The
    API serves orders from a threadpool, so counters only change under
    ``_lock``.
    """

    _scoops: dict[Flavor, int]
    cones_issued: int
    _lock: threading.Lock = field(compare=False, repr=False)

    def __init__(self, scoops: dict[Flavor, int] | None = None) -> None:
        self._scoops = {flavor: 0 for flavor in Flavor}
        self._scoops.update(scoops or {})
        self.cones_issued = 0
        self._lock = threading.Lock()

    def grab_cone(self, cone_type: ConeType, portion_size: PortionSize) -> Cone:
        """Hand out a fresh, empty cone."""
        with self._lock:
            self.cones_issued += 1
        return Cone(cone_type=cone_type, portion_size=portion_size)

    def has_flavor_available(self, flavor: Flavor) -> bool:
        """Take one scoop of the flavor if any is left."""
        with self._lock:
            if self._scoops[flavor] <= 0:
                return False
            self._scoops[flavor] -= 1
            return True

    def restock(self, flavor: Flavor, scoops: int) -> None:
        if scoops < 0:
            raise ValueError("scoops must not be negative")
        with self._lock:
            self._scoops[flavor] += scoops

    def scoops_left(self, flavor: Flavor) -> int:
        with self._lock:
            return self._scoops[flavor]
