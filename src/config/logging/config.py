"""Setup do logging do processo.

`configure_logging` é chamada uma vez pelo bootstrap; os módulos só
fazem `logging.getLogger(__name__)` e logam eventos snake_case com
`extra`, sem valores de payload.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SensitiveFieldFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "conversion_relay"

# Bibliotecas cujo INFO polui o log de cada request
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Instala um único handler JSON no root logger.

    Args:
        level: DEBUG, INFO, WARNING, ERROR ou CRITICAL (sem distinção de caixa).
        service_name: Valor do campo `service` em cada linha.
        correlation_id_getter: Lê o correlation_id da request corrente.

    Raises:
        ValueError: Nível fora de VALID_LOG_LEVELS.
    """
    normalized = level.upper()
    if normalized not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(normalized)
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SensitiveFieldFilter())
    handler.setFormatter(create_json_formatter())

    root = logging.getLogger()
    root.setLevel(normalized)
    root.handlers = [handler]

    quiet_level = max(logging.getLevelName(normalized), logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def get_logger(name: str) -> logging.Logger:
    """Atalho para logging.getLogger; o handler raiz injeta o contexto."""
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    field: str,
    fallback_value: str,
) -> None:
    """Registra que um campo ausente recebeu o valor default configurado.

    Args:
        logger: Logger do módulo chamador.
        component: Quem aplicou o default (ex: "fourthwall_normalizer").
        field: Campo lógico (ex: "currency", "customer_email").
        fallback_value: Valor de configuração aplicado, nunca dado do cliente.
    """
    logger.info(
        "Fallback applied for %s",
        component,
        extra={
            "fallback_used": True,
            "component": component,
            "field": field,
            "fallback_value": fallback_value,
        },
    )
