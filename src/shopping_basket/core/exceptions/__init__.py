from shopping_basket.core.exceptions.basket_error import BasketError
from shopping_basket.core.exceptions.configuration_error import ConfigurationError
from shopping_basket.core.exceptions.invalid_argument_error import InvalidArgumentError

__all__ = [
    "BasketError",
    "ConfigurationError",
    "InvalidArgumentError",
]
