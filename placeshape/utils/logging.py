"""Structured logging utilities."""
import json
import logging
import traceback
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from placeshape.core.config import LOG_LEVEL
from placeshape.utils.error_tracking import capture_exception

LOGGER_NAME = "placeshape"


def setup_logging(level: str = LOG_LEVEL):
    """Setup structured JSON logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(message)s',
        handlers=[logging.StreamHandler()]
    )


def log_structured(level: str, message: str, **kwargs):
    """
    Log structured JSON message.

    Args:
        level: Log level (info, warning, error, etc.)
        message: Log message
        **kwargs: Additional structured fields
    """
    log_entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "level": level.upper(),
        "message": message,
        **kwargs
    }

    logger = logging.getLogger(LOGGER_NAME)
    getattr(logger, level.lower(), logger.info)(json.dumps(log_entry, default=str))


def log_error(error: Exception, context: Optional[Dict[str, Any]] = None):
    """
    Log an exception with its traceback and forward it to error tracking.

    Args:
        error: The caught exception
        context: Where it happened (module, function, record ids, ...)
    """
    context = context or {}
    log_structured(
        "error",
        f"{type(error).__name__}: {error}",
        error_type=type(error).__name__,
        error_message=str(error),
        traceback="".join(traceback.format_exception(type(error), error, error.__traceback__)),
        **context
    )
    capture_exception(error, context)
