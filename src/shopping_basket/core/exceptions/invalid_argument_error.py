from __future__ import annotations

from shopping_basket.core.exceptions.basket_error import BasketError


class InvalidArgumentError(BasketError):
    """Raised when a required argument is missing or blank.

    Always raised before the basket store is touched.
    """

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(message, context={"argument": argument})
        self.argument = argument
