from __future__ import annotations

from shopping_basket.core.exceptions.basket_error import BasketError


class ConfigurationError(BasketError):
    """Raised when configuration is invalid or incomplete."""
