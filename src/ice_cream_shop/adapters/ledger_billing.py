"""In-process billing ledger."""

from dataclasses import dataclass, field

from ice_cream_shop.domain.orders import Order
from ice_cream_shop.services.shop import BillingSystem


@dataclass
class LedgerBillingSystem(BillingSystem):
    """Billing system that records charged orders in memory."""

    charges: list[Order] = field(default_factory=list)

    def charge(self, order: Order) -> None:
        self.charges.append(order)
