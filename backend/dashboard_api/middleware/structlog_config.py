"""
Structlog configuration for the dashboard API.

LOG_FORMAT picks the renderer: "json" for log shippers, "console" for local
runs. When unset, a TTY gets the console renderer and anything else gets JSON.
Call configure() once at app startup.
"""
import logging
import sys
from typing import Optional

import structlog

LOG_FORMATS = ("json", "console")


def select_renderer(log_format: Optional[str] = None, *, isatty: Optional[bool] = None):
    """Return the final processor for the given LOG_FORMAT value."""
    fmt = (log_format or "").strip().lower()
    if fmt and fmt not in LOG_FORMATS:
        raise ValueError(f"Invalid LOG_FORMAT '{log_format}'. Must be one of: {', '.join(LOG_FORMATS)}")
    if not fmt:
        fmt = "console" if (sys.stderr.isatty() if isatty is None else isatty) else "json"
    if fmt == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure(log_level: str = "INFO", log_format: Optional[str] = None) -> None:
    """Configure structlog and route stdlib records through the same renderer."""
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            select_renderer(log_format),
        ],
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    level = getattr(logging, log_level.upper(), logging.INFO)
    root.setLevel(level)

    # Store round-trips are logged by the services; the HTTP client and the
    # PostgREST/Supabase libraries only surface warnings unless debugging
    library_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in ("httpx", "httpcore", "postgrest", "supabase"):
        logging.getLogger(name).setLevel(library_level)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
