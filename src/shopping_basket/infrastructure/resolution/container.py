"""Functional DI container: one process-wide basket store, one pricing service.

Convenient free-function API for FastAPI dependency injection.
"""

from functools import lru_cache

from shopping_basket.core.application.ports.basket_store_port import BasketStorePort
from shopping_basket.core.application.ports.pricing_service_port import PricingServicePort
from shopping_basket.core.application.services.basket_pricing_service import BasketPricingService
from shopping_basket.infrastructure.configuration.pricing_settings import PricingSettings
from shopping_basket.infrastructure.repositories.in_memory_basket_store import InMemoryBasketStore


@lru_cache
def get_pricing_settings() -> PricingSettings:
    return PricingSettings()


@lru_cache
def get_basket_store() -> BasketStorePort:
    return InMemoryBasketStore()


@lru_cache
def get_pricing_service() -> PricingServicePort:
    return build_pricing_service(get_basket_store(), get_pricing_settings())


def build_pricing_service(store: BasketStorePort, settings: PricingSettings) -> PricingServicePort:
    return BasketPricingService(store=store, tables=settings.to_pricing_tables())


def reset_container() -> None:
    """Drop cached singletons so the next request rebuilds them from settings."""
    get_pricing_service.cache_clear()
    get_basket_store.cache_clear()
    get_pricing_settings.cache_clear()
