"""
Structured logging for the booking service.

Every event is stamped with the service name and environment so booking
denials can be filtered per deployment. Request context (request_id,
method, path) is merged in from contextvars bound by the middleware.
Production renders JSON, everything else a coloured console line.
"""

import logging
import sys
from typing import Optional
import structlog
from structlog.typing import EventDict, Processor

from hotel_booking.core.config import Settings, get_settings

# Marks the handler installed here so repeated setup replaces it
HANDLER_NAME = "hotel_booking"


def service_context(settings: Settings) -> Processor:
    def add_service(logger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", settings.APP_NAME)
        event_dict.setdefault("environment", settings.ENVIRONMENT)
        return event_dict
    return add_service


def build_processors(settings: Settings) -> list[Processor]:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        service_context(settings),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.ENVIRONMENT == "production":
        processors.append(structlog.processors.format_exc_info)
    return processors


def build_renderer(settings: Settings) -> Processor:
    if settings.ENVIRONMENT == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def setup_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()

    structlog.configure(
        processors=[
            *build_processors(settings),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            build_renderer(settings),
        ]
    ))

    root_logger = logging.getLogger()
    for existing in [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
