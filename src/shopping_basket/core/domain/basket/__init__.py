from shopping_basket.core.domain.basket.entities.basket import Basket
from shopping_basket.core.domain.basket.entities.basket_item import BasketItem

__all__ = ["Basket", "BasketItem"]
