from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from shopping_basket.core.application.dtos.add_item_request import AddItemRequest
from shopping_basket.core.domain.basket import BasketItem


class AddItemDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(..., alias="productId", min_length=1, max_length=100)
    price: Decimal = Field(..., ge=Decimal("0.01"), le=Decimal("999999"))
    quantity: int = Field(default=1, ge=1, le=1000)
    is_discounted: bool = Field(default=False, alias="isDiscounted")

    def to_request(self) -> AddItemRequest:
        return AddItemRequest(
            product_id=self.product_id,
            price=self.price,
            quantity=self.quantity,
            is_discounted=self.is_discounted,
        )


class BasketItemDTO(BaseModel):
    product_id: str
    price: Decimal
    quantity: int
    is_discounted: bool
    line_total: Decimal

    @classmethod
    def from_domain(cls, item: BasketItem) -> "BasketItemDTO":
        return cls(
            product_id=item.product_id,
            price=item.price,
            quantity=item.quantity,
            is_discounted=item.is_discounted,
            line_total=item.line_total,
        )


class TotalDTO(BaseModel):
    total: Decimal
    include_vat: bool
