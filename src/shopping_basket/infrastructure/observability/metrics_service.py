"""Prometheus metrics declarations.

Labels use ONLY static enumerations, never usernames or product ids.
"""

from prometheus_client import Counter

BASKET_OPERATIONS_TOTAL = Counter(
    "basket_operations_total",
    "Basket operations handled, by outcome",
    ["operation", "outcome"],
)
