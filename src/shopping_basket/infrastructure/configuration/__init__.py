from shopping_basket.infrastructure.configuration.main_settings import Settings
from shopping_basket.infrastructure.configuration.pricing_settings import PricingSettings

__all__ = ["PricingSettings", "Settings"]
