from shopping_basket.core.application.services.basket_pricing_service import BasketPricingService

__all__ = ["BasketPricingService"]
