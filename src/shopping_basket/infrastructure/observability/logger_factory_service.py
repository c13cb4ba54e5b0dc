"""Logging setup for the basket service.

structlog renders every event, including records emitted through stdlib
``logging`` (uvicorn, fastapi), with the same processor chain. The
``log_level`` setting filters both.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from typing import Any

import structlog

from shopping_basket.infrastructure.observability.logging.schema_processor import (
    basket_schema_processor,
)

_CONFIGURED = False

_METHOD_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "msg": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "exception": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.CRITICAL,
}


def configure_logging(log_level: str = "INFO") -> None:
    """Only the first call takes effect."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    renderer = _select_renderer()
    chain = _shared_processors()

    structlog.configure(
        processors=[level_filter(level), *chain, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _install_stdlib_bridge(chain, renderer, level)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger(context_component=component)


def level_filter(min_level: int) -> Callable[[Any, str, dict[str, Any]], dict[str, Any]]:
    """Processor dropping structlog events below min_level."""

    def _filter(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
        if _METHOD_LEVELS.get(method_name, logging.INFO) < min_level:
            raise structlog.DropEvent
        return event_dict

    return _filter


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        basket_schema_processor,
    ]


def _install_stdlib_bridge(chain: list[Any], renderer: Any, level: int) -> None:
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *chain, renderer],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _select_renderer() -> Any:
    """JSON outside local environments unless LOG_FORMAT says otherwise."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format in ("json", "console"):
        use_json = log_format == "json"
    else:
        use_json = os.environ.get("APP_ENV", "local").lower() in ("qa", "staging", "prod", "production")

    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
