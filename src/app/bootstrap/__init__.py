"""Composition root do relay.

- initialize_app(): logging JSON com correlation_id do contexto
- validate_runtime_settings(): checagem de configuração no startup
- get_relay_use_case(): use case montado com as settings do ambiente
"""

from __future__ import annotations

import logging
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_fourthwall_settings,
    get_tapfiliate_settings,
)

SERVICE_NAME = "conversion_relay"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura o logging do processo a partir de BaseSettings (uma vez)."""
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name or SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings."""
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in get_base_settings().validate())
    errors.extend(f"fourthwall: {error}" for error in get_fourthwall_settings().validate())
    errors.extend(f"tapfiliate: {error}" for error in get_tapfiliate_settings().validate())
    return errors


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    fourthwall = get_fourthwall_settings()

    if fourthwall.is_insecure_signature_policy:
        logger.warning(
            "insecure_signature_policy",
            extra={
                "component": "bootstrap",
                "policy": fourthwall.signature_policy,
                "environment": base.environment,
            },
        )

    errors = collect_settings_errors()
    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors


@lru_cache(maxsize=1)
def get_relay_use_case():
    """Obtém o use case do relay (singleton).

    Returns:
        RelayConversionUseCase montado com as settings do ambiente
    """
    from app.bootstrap.conversion_factory import create_relay_use_case

    return create_relay_use_case()
