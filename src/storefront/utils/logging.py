"""Storefront logging.

Console output always; a rotating ``lovecakes.log`` is added when
``STOREFRONT_LOG_DIR`` is set. Each HTTP request binds its method and path plus
the tenant headers, so handler log lines can be traced back to a shopper.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

import structlog

QUIET_LOGGERS = ("protean", "httpx", "uvicorn.access")

LEVELS = {"production": "INFO", "staging": "INFO", "test": "WARNING"}


def _environment() -> str:
    return (os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def _handlers(level: str) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    log_dir = os.getenv("STOREFRONT_LOG_DIR")
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                path / "lovecakes.log", maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
        )

    for handler in handlers:
        handler.setLevel(level)
    return handlers


def _renderer(environment: str):
    if environment in ("production", "staging"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.RichTracebackFormatter(show_locals=False, max_frames=2),
    )


def configure_logging() -> None:
    """Send stdlib and structlog output through the storefront handlers."""
    environment = _environment()
    level = os.getenv("LOG_LEVEL", LEVELS.get(environment, "DEBUG")).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = _handlers(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            _renderer(environment),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def bind_request(method: str, path: str, account_id=None, user_id=None) -> None:
    """Replace the log context with the current request's details.

    Tenant headers are bound as sent; ``None`` values are left out.
    """
    structlog.contextvars.clear_contextvars()
    context = {"method": method, "path": path, "account_id": account_id, "user_id": user_id}
    structlog.contextvars.bind_contextvars(**{key: value for key, value in context.items() if value is not None})
