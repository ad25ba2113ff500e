"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns a structlog logger bound to a component name
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from printify_storefront.infrastructure.observability.logging.storefront_schema_processor import (
    storefront_schema_processor,
)

_CONFIGURED = False


def configure_logging(level: str = "INFO") -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Renderer is selected by LOG_FORMAT env (json|console) or APP_ENV.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        storefront_schema_processor,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # Not cached: each logger resolves sys.stdout when used, so redirected streams are honoured.
        cache_logger_on_first_use=False,
    )

    # Route logging.getLogger() output (uvicorn, httpx) through the same pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level.upper())


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a lazy structlog logger carrying context_component.

    Binding stays lazy so module-level loggers pick up configure_logging()
    even when they are created before it runs.
    """
    return structlog.get_logger(context_component=component)


def _select_renderer() -> Any:
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)

    env = os.environ.get("APP_ENV", "local").lower()
    if env in ("qa", "staging", "prod", "production"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
