from dataclasses import dataclass, field
from decimal import Decimal

from shopping_basket.core.domain.basket.entities.basket_item import BasketItem


@dataclass
class Basket:
    """
    A single user's basket: line items keyed by product id, the discount codes
    applied so far and the chosen shipping region.

    Applied codes behave as an insertion-ordered, case-insensitive set. The
    spelling of the first add is kept and iteration follows the order in which
    codes were applied, so compounding discounts is reproducible.
    """

    username: str
    items: dict[str, BasketItem] = field(default_factory=dict)
    shipping_region: str | None = None
    _applied_codes: dict[str, str] = field(default_factory=dict, repr=False)

    @property
    def applied_discount_codes(self) -> tuple[str, ...]:
        return tuple(self._applied_codes.values())

    def add_discount_code(self, code: str) -> bool:
        """Returns False when the code (ignoring case) is already applied."""
        key = code.casefold()
        if key in self._applied_codes:
            return False
        self._applied_codes[key] = code
        return True

    def has_discount_code(self, code: str) -> bool:
        return code.casefold() in self._applied_codes

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def discounted_items_total(self) -> Decimal:
        return sum(
            (item.line_total for item in self.items.values() if item.is_discounted),
            Decimal("0"),
        )

    @property
    def non_discounted_items_total(self) -> Decimal:
        return sum(
            (item.line_total for item in self.items.values() if not item.is_discounted),
            Decimal("0"),
        )
