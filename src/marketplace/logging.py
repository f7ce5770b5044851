"""Structured JSON logging for the marketplace.

Every record is one JSON object on stdout. Application code logs snake_case
events through get_logger(); uvicorn, SQLAlchemy and Alembic records are run
through the same formatter so a request's lines can be joined on request_id,
which RequestIDMiddleware binds with structlog.contextvars.
"""

import logging
import logging.config
import sys
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from structlog.stdlib import BoundLogger

# Libraries that log every statement, migration step or access line at INFO
QUIET_LIBRARY_LOGGERS = ("sqlalchemy", "alembic", "uvicorn.access")


def _add_timestamp(
    _logger: object,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    event_dict["timestamp"] = datetime.now(UTC).isoformat()
    return event_dict


class LoggingSettings(BaseSettings):
    """LOG_LEVEL for marketplace loggers, LIBRARY_LOG_LEVEL for QUIET_LIBRARY_LOGGERS."""

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    library_log_level: str = Field(default="WARNING", alias="LIBRARY_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )


def _shared_processors() -> list[Any]:
    """Processors applied to structlog events and foreign stdlib records alike."""
    return [
        # request_id, method and path bound by the middleware
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        # alembic and uvicorn still log with %-style arguments
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(settings: LoggingSettings) -> None:
    """Route structlog and stdlib logging to a single JSON handler on stdout.

    Runs once when this module is imported; main.run() passes log_config=None
    to uvicorn so its own dictConfig does not replace this one.
    """
    processors = _shared_processors()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    loggers: dict[str, dict[str, Any]] = {
        "": {"handlers": ["stdout"], "level": settings.log_level, "propagate": True},
    }
    for name in QUIET_LIBRARY_LOGGERS:
        loggers[name] = {"level": settings.library_log_level, "propagate": True}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": structlog.stdlib.ProcessorFormatter,
                    "processor": structlog.processors.JSONRenderer(),
                    "foreign_pre_chain": processors,
                },
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                },
            },
            "loggers": loggers,
        }
    )


configure_logging(LoggingSettings())


def get_logger(name: str) -> BoundLogger:
    """Return a structlog logger for a marketplace module.

    Events are snake_case names with the affected ids as keyword fields:

        logger = get_logger(__name__)
        logger.info("offer_amended", offer_id=7, intention_id=3, updates_count=1)
        # {"event": "offer_amended", "offer_id": 7, "request_id": "...", "level": "info", ...}
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
