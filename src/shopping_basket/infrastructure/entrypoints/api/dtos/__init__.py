from shopping_basket.infrastructure.entrypoints.api.dtos.basket_dtos import (
    AddItemDTO,
    BasketItemDTO,
    TotalDTO,
)

__all__ = ["AddItemDTO", "BasketItemDTO", "TotalDTO"]
