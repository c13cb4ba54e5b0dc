from typing import Any


class BasketError(Exception):
    """Base exception for all basket service errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}
