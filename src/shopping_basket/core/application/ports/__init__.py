from shopping_basket.core.application.ports.basket_store_port import BasketStorePort
from shopping_basket.core.application.ports.pricing_service_port import PricingServicePort

__all__ = ["BasketStorePort", "PricingServicePort"]
