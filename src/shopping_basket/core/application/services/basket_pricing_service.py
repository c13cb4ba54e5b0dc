"""Basket pricing service: input validation, mutation rules and totals.

Totals are computed in this order: applied discount codes compound over the
non-discounted subtotal (in the order the codes were applied), pre-discounted
lines are added untouched, then shipping, then VAT on the whole amount.
No rounding is applied.
"""

from dataclasses import replace
from decimal import Decimal

import structlog

from shopping_basket.core.application.dtos.add_item_request import AddItemRequest
from shopping_basket.core.application.ports.basket_store_port import BasketStorePort
from shopping_basket.core.application.ports.pricing_service_port import PricingServicePort
from shopping_basket.core.domain.basket import Basket, BasketItem
from shopping_basket.core.domain.pricing import PricingTables
from shopping_basket.core.exceptions import ConfigurationError, InvalidArgumentError

logger = structlog.get_logger(context_component=__name__)


class BasketPricingService(PricingServicePort):
    def __init__(self, store: BasketStorePort, tables: PricingTables) -> None:
        if store is None:
            raise ConfigurationError("BasketPricingService requires a basket store.")
        if tables is None:
            raise ConfigurationError("BasketPricingService requires pricing tables.")
        self._store = store
        self._tables = tables

    def add_items(self, username: str, requests: list[AddItemRequest]) -> None:
        _require(username, "username", "Username is required")
        if not requests:
            raise InvalidArgumentError("requests", "Items are required")
        for request in requests:
            _require(request.product_id, "product_id", "Product id is required")

        for request in requests:
            self._store.add_item(
                BasketItem(
                    username=username,
                    product_id=request.product_id,
                    price=request.price,
                    quantity=request.quantity,
                    is_discounted=request.is_discounted,
                )
            )
        logger.info("Items added to basket", actor_id=username, item_count=len(requests))

    def remove_item(self, username: str, product_id: str) -> bool:
        _require(username, "username", "Username is required")
        _require(product_id, "product_id", "Product id is required")

        removed = self._store.remove_item(username, product_id)
        if removed:
            logger.info("Item removed from basket", actor_id=username, product_id=product_id)
        else:
            logger.info("Item not found in basket", actor_id=username, product_id=product_id)
        return removed

    def apply_discount_code(self, username: str, code: str) -> bool:
        _require(username, "username", "Username is required")
        _require(code, "code", "Discount code is required")

        if self._tables.discount_for(code) is None:
            logger.warning("Discount code rejected", actor_id=username, code=code, reason="unknown")
            return False

        applied = self._store.with_basket(username, lambda basket: basket.add_discount_code(code))
        if not applied:
            logger.warning("Discount code rejected", actor_id=username, code=code, reason="already_applied")
            return False

        logger.info("Discount code applied", actor_id=username, code=code)
        return True

    def set_shipping_country(self, username: str, country: str) -> bool:
        _require(username, "username", "Username is required")
        _require(country, "country", "Country is required")

        if country not in self._tables.shipping:
            logger.warning("Shipping country rejected", actor_id=username, country=country)
            return False

        def _set_region(basket: Basket) -> None:
            basket.shipping_region = country

        self._store.with_basket(username, _set_region)
        logger.info("Shipping country set", actor_id=username, country=country)
        return True

    def get_total(self, username: str, include_vat: bool) -> Decimal:
        _require(username, "username", "Username is required")

        return self._store.with_basket(
            username, lambda basket: self._calculate_total(basket, include_vat)
        )

    def get_basket_items(self, username: str) -> list[BasketItem]:
        _require(username, "username", "Username is required")

        return self._store.with_basket(
            username, lambda basket: [replace(item) for item in basket.items.values()]
        )

    def _calculate_total(self, basket: Basket, include_vat: bool) -> Decimal:
        total = self._calculate_items_total(basket)
        total += self._tables.shipping_cost_for(basket.shipping_region)
        if include_vat:
            total = self._apply_vat(total)
        return total

    def _calculate_items_total(self, basket: Basket) -> Decimal:
        non_discounted_total = basket.non_discounted_items_total
        for code in basket.applied_discount_codes:
            percentage = self._tables.discount_for(code) or Decimal("0")
            non_discounted_total -= non_discounted_total * percentage

        return non_discounted_total + basket.discounted_items_total

    def _apply_vat(self, amount: Decimal) -> Decimal:
        return amount + amount * self._tables.vat_rate


def _require(value: str | None, argument: str, message: str) -> None:
    if value is None or not value.strip():
        raise InvalidArgumentError(argument, message)
