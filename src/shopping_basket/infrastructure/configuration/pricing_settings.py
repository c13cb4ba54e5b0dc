from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopping_basket.core.domain.pricing import PricingTables


class PricingSettings(BaseSettings):
    """Discount codes, shipping regions and the VAT rate.

    Tables are read from the environment as JSON objects, e.g.
    BASKET_DISCOUNTS='{"SUMMER10": 0.10}' and BASKET_SHIPPING='{"UK": 5}'.
    """

    discounts: dict[str, Decimal] = Field(
        default_factory=lambda: {"SUMMER10": Decimal("0.10")}, alias="BASKET_DISCOUNTS"
    )
    shipping: dict[str, Decimal] = Field(
        default_factory=lambda: {"UK": Decimal("5")}, alias="BASKET_SHIPPING"
    )
    vat_rate: Decimal = Field(default=Decimal("0.20"), alias="BASKET_VAT_RATE")

    @field_validator("discounts")
    @classmethod
    def validate_discounts(cls, value: dict[str, Decimal]) -> dict[str, Decimal]:
        for code, percentage in value.items():
            if not code.strip():
                raise ValueError("Discount codes must not be blank.")
            if not Decimal("0") < percentage <= Decimal("1"):
                raise ValueError(f"Discount '{code}' must be in (0, 1], got {percentage}.")
        return value

    @field_validator("shipping")
    @classmethod
    def validate_shipping(cls, value: dict[str, Decimal]) -> dict[str, Decimal]:
        for region, cost in value.items():
            if cost < 0:
                raise ValueError(f"Shipping cost for '{region}' must not be negative.")
        return value

    @field_validator("vat_rate")
    @classmethod
    def validate_vat_rate(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise ValueError("VAT rate must not be negative.")
        return value

    def to_pricing_tables(self) -> PricingTables:
        return PricingTables(discounts=self.discounts, shipping=self.shipping, vat_rate=self.vat_rate)

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
