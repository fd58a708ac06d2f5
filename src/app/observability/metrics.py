"""Métricas do relay emitidas como linhas de log estruturado.

Não há backend de métricas: o agregador de logs conta e mede a partir
dos campos `metric_type`, `outcome`, `status_code` e `latency_ms`.

    started = time.perf_counter()
    ...
    record_latency("tapfiliate", "create_conversion", (time.perf_counter() - started) * 1000)
    record_relay_outcome("submitted", 200)
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _emit(event: str, metric_type: str, correlation_id: str | None, **fields: Any) -> None:
    extra = {"metric_type": metric_type, **fields}
    # Vazio deixa o CorrelationIdFilter preencher a partir do contexto
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info(event, extra=extra)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Duração de uma chamada outbound, em ms com duas casas."""
    _emit(
        "metric_latency",
        "latency",
        correlation_id,
        component=component,
        operation=operation,
        latency_ms=round(latency_ms, 2),
    )


def record_relay_outcome(
    outcome: str,
    status_code: int,
    reason: str | None = None,
    correlation_id: str | None = None,
) -> None:
    """Counter de resultado por webhook.

    Args:
        outcome: submitted|ignored|upstream_rejected|rejected|failed
        status_code: Status devolvido à Fourthwall
        reason: Código estável do motivo (ex: "invalid_amount")
        correlation_id: Id da request; vazio usa o do contexto
    """
    _emit(
        "metric_relay_outcome",
        "counter",
        correlation_id,
        outcome=outcome,
        status_code=status_code,
        reason=reason,
    )
