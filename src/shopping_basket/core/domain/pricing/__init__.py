from shopping_basket.core.domain.pricing.value_objects.pricing_tables import PricingTables

__all__ = ["PricingTables"]
