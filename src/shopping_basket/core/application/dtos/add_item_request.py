from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AddItemRequest(BaseModel):
    """One line to add to a basket, as accepted by the pricing service."""

    model_config = ConfigDict(frozen=True)

    product_id: str = Field(..., min_length=1, max_length=100)
    price: Decimal = Field(..., ge=Decimal("0.01"), le=Decimal("999999"))
    quantity: int = Field(default=1, ge=1, le=1000)
    is_discounted: bool = False
