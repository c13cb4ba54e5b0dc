from abc import ABC, abstractmethod
from decimal import Decimal

from shopping_basket.core.application.dtos.add_item_request import AddItemRequest
from shopping_basket.core.domain.basket import BasketItem


class PricingServicePort(ABC):
    @abstractmethod
    def add_items(self, username: str, requests: list[AddItemRequest]) -> None:
        pass

    @abstractmethod
    def remove_item(self, username: str, product_id: str) -> bool:
        pass

    @abstractmethod
    def apply_discount_code(self, username: str, code: str) -> bool:
        pass

    @abstractmethod
    def set_shipping_country(self, username: str, country: str) -> bool:
        pass

    @abstractmethod
    def get_total(self, username: str, include_vat: bool) -> Decimal:
        pass

    @abstractmethod
    def get_basket_items(self, username: str) -> list[BasketItem]:
        pass
