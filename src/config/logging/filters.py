"""Filters aplicados ao handler JSON do relay.

- CorrelationIdFilter: carimba `correlation_id` e `service` em cada record
- SensitiveFieldFilter: mascara email e remove credenciais de `extra`

Os dois rodam no handler, então valem para qualquer logger da árvore.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from utils.sanitizer import mask_email

if TYPE_CHECKING:
    from collections.abc import Callable

REDACTED = "[REDACTED]"

# Atributos de `extra` que nunca saem em claro
SECRET_FIELDS = frozenset(
    {"api_key", "webhook_secret", "secret", "signature", "authorization"}
)
EMAIL_FIELDS = frozenset({"customer_email", "email"})


class CorrelationIdFilter(logging.Filter):
    """Carimba correlation_id e nome do serviço no record.

    Args:
        service_name: Valor do campo `service`.
        correlation_id_getter: Lê o id da request corrente (ContextVar).
            Sem getter, o campo sai vazio.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # Um correlation_id explícito em `extra` vence o do contexto
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        record.service = self._service_name
        return True


class SensitiveFieldFilter(logging.Filter):
    """Mascara PII e credenciais que chegarem via `extra`.

    Email vira `a***@dominio`; secret, API key e assinatura viram
    `[REDACTED]`. Nunca descarta o record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        for name in SECRET_FIELDS:
            if getattr(record, name, None):
                setattr(record, name, REDACTED)
        for name in EMAIL_FIELDS:
            value = getattr(record, name, None)
            if isinstance(value, str):
                setattr(record, name, mask_email(value))
        return True
