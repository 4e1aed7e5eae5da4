"""
Scaffolding Property Metadata - Structured Logging
Provides JSON-formatted logging for metadata extraction events.
"""

import logging
import sys
from pythonjsonlogger import jsonlogger

from .config import LOG_LEVEL, SCAFFOLD_LOG_BUILDS, config


def setup_logger(name: str = __name__) -> logging.Logger:
    """
    Configure structured JSON logger.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger(__name__)
        >>> logger.info("Metadata built", extra={
        ...     "property_name": "status",
        ...     "source": "model",
        ... })
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers; root handlers don't count since we don't propagate
    if logger.handlers:
        return logger

    level = getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)

    # JSON formatter for structured logs
    formatter = jsonlogger.JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    # Don't propagate to root logger
    logger.propagate = False

    return logger


# Global logger instance
logger = setup_logger('scaffolding')


def log_property_metadata_built(metadata, source: str):
    """Log a freshly built PropertyMetadata when build logging is enabled."""
    if not SCAFFOLD_LOG_BUILDS:
        return
    logger.debug("Property metadata built", extra={
        "event_type": "property_metadata_built",
        "source": source,
        "property_name": metadata.property_name,
        "type_name": metadata.type_name,
        "scaffold": metadata.scaffold,
        "environment": config.environment
    })


def log_precondition_violation(source: str, reason: str):
    """Log a rejected property descriptor."""
    logger.warning("Property metadata precondition violated", extra={
        "event_type": "precondition_violation",
        "source": source,
        "reason": reason
    })
