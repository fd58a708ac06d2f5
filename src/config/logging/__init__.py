"""Logging JSON estruturado do relay.

    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="conversion_relay")
    logger = get_logger(__name__)
    logger.info("conversion_submitted", extra={"status_code": 201})

Cada linha traz asctime, level, logger, message, correlation_id e
service. Emails em `extra` saem mascarados e credenciais redigidas.
"""

from config.logging.config import configure_logging, get_logger, log_fallback
from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "SensitiveFieldFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
