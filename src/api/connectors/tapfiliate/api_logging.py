"""Helpers de logging para API Tapfiliate (sem PII nem API key)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_api_error(
    endpoint: str,
    status_code: int,
    external_id: str,
) -> None:
    """Loga resposta não-2xx da Tapfiliate."""
    logger.warning(
        "tapfiliate_error_response",
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "status_code": status_code,
            "external_id": external_id,
        },
    )


def log_success(
    endpoint: str,
    status_code: int,
    external_id: str,
) -> None:
    """Loga conversão aceita."""
    logger.info(
        "conversion_submitted",
        extra={
            "method": "POST",
            "endpoint": endpoint,
            "status_code": status_code,
            "external_id": external_id,
        },
    )
