import threading
from collections.abc import Callable
from typing import TypeVar

from shopping_basket.core.application.ports.basket_store_port import BasketStorePort
from shopping_basket.core.domain.basket import Basket, BasketItem

T = TypeVar("T")


class InMemoryBasketStore(BasketStorePort):
    """
    Process-local basket storage keyed by username.
    A single re-entrant lock guards the map and every basket-level
    read-modify step, so concurrent requests never interleave on a basket.
    """

    def __init__(self) -> None:
        self._baskets: dict[str, Basket] = {}
        self._lock = threading.RLock()

    def get_basket(self, username: str) -> Basket:
        with self._lock:
            return self._get_or_create(username)

    def add_item(self, item: BasketItem) -> None:
        with self._lock:
            basket = self._get_or_create(item.username)
            existing = basket.items.get(item.product_id)
            if existing is not None:
                existing.quantity += item.quantity
            else:
                basket.items[item.product_id] = item

    def remove_item(self, username: str, product_id: str) -> bool:
        with self._lock:
            basket = self._baskets.get(username)
            if basket is None or product_id not in basket.items:
                return False
            del basket.items[product_id]
            return True

    def with_basket(self, username: str, operation: Callable[[Basket], T]) -> T:
        with self._lock:
            return operation(self._get_or_create(username))

    def has_basket(self, username: str) -> bool:
        with self._lock:
            return username in self._baskets

    def _get_or_create(self, username: str) -> Basket:
        basket = self._baskets.get(username)
        if basket is None:
            basket = Basket(username=username)
            self._baskets[username] = basket
        return basket
