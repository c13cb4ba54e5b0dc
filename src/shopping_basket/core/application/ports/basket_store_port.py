from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

from shopping_basket.core.domain.basket import Basket, BasketItem

T = TypeVar("T")


class BasketStorePort(ABC):
    @abstractmethod
    def get_basket(self, username: str) -> Basket:
        """Returns the user's basket, creating an empty one if absent."""
        pass

    @abstractmethod
    def add_item(self, item: BasketItem) -> None:
        """Stores the item, or adds its quantity to an existing line for the same product."""
        pass

    @abstractmethod
    def remove_item(self, username: str, product_id: str) -> bool:
        """Removes a line. False when the basket or the product does not exist."""
        pass

    @abstractmethod
    def with_basket(self, username: str, operation: Callable[[Basket], T]) -> T:
        """Runs operation against the user's basket under the store's lock."""
        pass

    @abstractmethod
    def has_basket(self, username: str) -> bool:
        """Reports whether a basket exists, without creating one."""
        pass
