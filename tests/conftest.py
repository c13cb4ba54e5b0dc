from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from shopping_basket.core.application.services.basket_pricing_service import BasketPricingService
from shopping_basket.infrastructure.configuration.main_settings import Settings
from shopping_basket.infrastructure.configuration.pricing_settings import PricingSettings
from shopping_basket.infrastructure.entrypoints.api.app_factory import create_app
from shopping_basket.infrastructure.repositories.in_memory_basket_store import InMemoryBasketStore
from shopping_basket.infrastructure.resolution.container import get_pricing_service


@pytest.fixture
def pricing_settings():
    return PricingSettings(
        discounts={"SUMMER10": Decimal("0.10"), "WINTER20": Decimal("0.20")},
        shipping={"UK": Decimal("5"), "US": Decimal("12.50")},
        vat_rate=Decimal("0.20"),
    )

@pytest.fixture
def store():
    return InMemoryBasketStore()

@pytest.fixture
def service(store, pricing_settings):
    return BasketPricingService(store=store, tables=pricing_settings.to_pricing_tables())

@pytest.fixture
def app(service):
    application = create_app(Settings(app_name="TestBasket"))
    application.dependency_overrides[get_pricing_service] = lambda: service
    yield application
    application.dependency_overrides.clear()

@pytest.fixture
def client(app):
    return TestClient(app)

@pytest.fixture
def auth_headers():
    return {"X-Username": "test-user"}
