from shopping_basket.infrastructure.repositories.in_memory_basket_store import InMemoryBasketStore

__all__ = ["InMemoryBasketStore"]
