"""
structlog configuration for remote_data.

The core never logs; only the producer adapters do, when they reject a
signal. Host applications that already configure structlog can skip this.
"""

from __future__ import annotations

import structlog

from remote_data.config import RemoteDataSettings


def configure_logging(settings: RemoteDataSettings | None = None) -> None:
    """
    Configure structlog from settings (environment when omitted).

    console → colored, human-readable lines (development)
    json    → one JSON object per line (log shipping)
    """
    settings = settings or RemoteDataSettings()
    renderer = (
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_number),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
