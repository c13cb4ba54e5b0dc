from dataclasses import dataclass
from decimal import Decimal


@dataclass
class BasketItem:
    username: str
    product_id: str
    price: Decimal
    quantity: int = 1
    is_discounted: bool = False

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity
