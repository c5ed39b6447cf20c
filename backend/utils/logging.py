"""structlog setup for the greeting service.

``api.main`` calls ``configure_logging`` once when it is imported, before
the app is built, so uvicorn's own loggers and the service's event logs
share one level. Events are snake_case names with keyword context, e.g.
``greeting_served source=path name_present=True``.
"""

import logging
import os
import sys

import structlog

# uvicorn logs through stdlib; keep it at the service level
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def _renderer(json_logs: bool) -> structlog.types.Processor:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    *,
    json_logs: bool | None = None,
    log_level: str = "INFO",
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        json_logs: Emit one JSON object per line. Defaults to ``True`` when
            ``ENVIRONMENT`` is ``"production"``.
        log_level: Level name; unknown names fall back to INFO.
    """
    if json_logs is None:
        json_logs = os.getenv("ENVIRONMENT", "development") == "production"

    level = getattr(logging, log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(json_logs)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # filter_by_level reads the stdlib level
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    logging.getLogger().setLevel(level)
    for name in _UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(level)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound logger for *name*."""
    return structlog.get_logger(name)
