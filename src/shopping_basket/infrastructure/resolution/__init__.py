from shopping_basket.infrastructure.resolution.container import (
    build_pricing_service,
    get_basket_store,
    get_pricing_service,
    get_pricing_settings,
    reset_container,
)

__all__ = [
    "build_pricing_service",
    "get_basket_store",
    "get_pricing_service",
    "get_pricing_settings",
    "reset_container",
]
