"""structlog-backed logging setup for the service.

Modules log through ``logging.getLogger(__name__)`` and pass context in
``extra={...}``. Records are rendered by structlog:
- Human (default): console renderer to stderr
- JSON (MAP_LOG_STRUCTURED=true): one JSON object per line, ``extra`` fields included
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("map_routing")

SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.ExtraAdder(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def build_formatter(structured: bool) -> structlog.stdlib.ProcessorFormatter:
    """Return the stdlib formatter rendering records through structlog."""
    if structured:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure structlog and install a single stderr handler on the root logger.

    Args:
        config: Logging settings; defaults to the application config.
    """
    config = config or get_config().observability

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(build_formatter(config.structured))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(config.level.upper())

    logger.debug(
        "Logging configured",
        extra={"log_level": config.level, "structured": config.structured},
    )
