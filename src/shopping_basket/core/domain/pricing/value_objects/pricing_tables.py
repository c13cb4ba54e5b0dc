from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType


@dataclass(frozen=True)
class PricingTables:
    """Discount, shipping and VAT lookups, immutable once loaded.

    Discount and shipping lookups are case-sensitive. Not hashable: the
    tables are read-only mappings.
    """

    __hash__ = None
    discounts: Mapping[str, Decimal] = field(default_factory=dict)
    shipping: Mapping[str, Decimal] = field(default_factory=dict)
    vat_rate: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "discounts", MappingProxyType(dict(self.discounts)))
        object.__setattr__(self, "shipping", MappingProxyType(dict(self.shipping)))

    def discount_for(self, code: str) -> Decimal | None:
        return self.discounts.get(code)

    def shipping_cost_for(self, region: str | None) -> Decimal:
        if region is None:
            return Decimal("0")
        return self.shipping.get(region, Decimal("0"))
