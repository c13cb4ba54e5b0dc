from shopping_basket.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from shopping_basket.infrastructure.observability.logging.schema_processor import (
    basket_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "basket_schema_processor",
]
