"""
Logging configuration for chatdraft.

Centralized logging setup with:
- Structured JSON output
- Dispatch correlation ID tracking
"""

import logging
import sys
from contextvars import ContextVar
from uuid import uuid4

import structlog

from ..config import Settings
from ..config import settings as default_settings

# Context variable for dispatch correlation
correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured logging.

    Args:
        service_name: Name of the service for log context
        level: Minimum stdlib log level name
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_service_name(service_name),
            _add_correlation_id,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def _add_service_name(service_name: str):
    """Processor to add service name to all logs."""

    def processor(logger, method_name, event_dict):
        event_dict["service"] = service_name
        return event_dict

    return processor


def _add_correlation_id(logger, method_name, event_dict):
    """Processor to add correlation ID if present."""
    cid = correlation_id.get()
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def new_correlation_id() -> str:
    """Start a new correlation ID for the current context and return it."""
    cid = str(uuid4())
    correlation_id.set(cid)
    return cid


def get_correlation_id() -> str:
    return correlation_id.get()


def configure_logging_from_settings(settings: Settings | None = None) -> None:
    """Configure logging from the CHATDRAFT_* settings."""
    settings = settings or default_settings
    configure_logging(settings.service_name, settings.log_level)
