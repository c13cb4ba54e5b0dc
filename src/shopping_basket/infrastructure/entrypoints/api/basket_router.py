from fastapi import APIRouter, Depends, HTTPException, Query, status

from shopping_basket.core.application.ports.pricing_service_port import PricingServicePort
from shopping_basket.infrastructure.entrypoints.api.dtos.basket_dtos import (
    AddItemDTO,
    BasketItemDTO,
    TotalDTO,
)
from shopping_basket.infrastructure.entrypoints.api.security import get_current_username
from shopping_basket.infrastructure.observability.metrics_service import BASKET_OPERATIONS_TOTAL
from shopping_basket.infrastructure.resolution.container import get_pricing_service

router = APIRouter(prefix="/api/basket", tags=["basket"])

_OK = {"status": "ok"}


def _record(operation: str, success: bool) -> None:
    BASKET_OPERATIONS_TOTAL.labels(
        operation=operation, outcome="success" if success else "rejected"
    ).inc()


@router.post("/items")
def add_items(
    items: list[AddItemDTO],
    username: str = Depends(get_current_username),
    service: PricingServicePort = Depends(get_pricing_service),
) -> dict[str, str]:
    if not items:
        _record("add_items", False)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="At least one item is required"
        )

    service.add_items(username, [item.to_request() for item in items])
    _record("add_items", True)
    return _OK


@router.delete("/items/{product_id}")
def remove_item(
    product_id: str,
    username: str = Depends(get_current_username),
    service: PricingServicePort = Depends(get_pricing_service),
) -> dict[str, str]:
    removed = service.remove_item(username, product_id)
    _record("remove_item", removed)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product {product_id} not found in basket.",
        )
    return _OK


@router.get("/total", response_model=TotalDTO)
def get_total(
    include_vat: bool = Query(default=True, alias="includeVat"),
    username: str = Depends(get_current_username),
    service: PricingServicePort = Depends(get_pricing_service),
) -> TotalDTO:
    total = service.get_total(username, include_vat)
    _record("get_total", True)
    return TotalDTO(total=total, include_vat=include_vat)


@router.post("/discount-code")
def apply_discount_code(
    code: str = Query(...),
    username: str = Depends(get_current_username),
    service: PricingServicePort = Depends(get_pricing_service),
) -> dict[str, str]:
    applied = service.apply_discount_code(username, code)
    _record("apply_discount_code", applied)
    if not applied:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Discount code '{code}' is invalid or expired.",
        )
    return _OK


@router.post("/shipping")
def set_shipping(
    country: str = Query(...),
    username: str = Depends(get_current_username),
    service: PricingServicePort = Depends(get_pricing_service),
) -> dict[str, str]:
    accepted = service.set_shipping_country(username, country)
    _record("set_shipping_country", accepted)
    if not accepted:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Shipping country '{country}' not supported.",
        )
    return _OK


@router.get("/items", response_model=list[BasketItemDTO])
def get_basket_items(
    username: str = Depends(get_current_username),
    service: PricingServicePort = Depends(get_pricing_service),
) -> list[BasketItemDTO]:
    items = service.get_basket_items(username)
    _record("get_basket_items", bool(items))
    if not items:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Empty basket.")
    return [BasketItemDTO.from_domain(item) for item in items]
