"""Taxonomia de erros do relay de conversões.

Cada erro carrega o status HTTP e o código estável usado na resposta,
para que a camada de rotas traduza sem conhecer o motivo da falha.
"""

from __future__ import annotations

from typing import Any


class ConversionRelayError(Exception):
    """Base para falhas tratadas pelo relay."""

    status_code: int = 500
    error_code: str = "relay_error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.error_code)
        self.detail = detail or self.error_code


class MethodNotAllowedError(ConversionRelayError):
    """Método HTTP diferente de POST."""

    status_code = 405
    error_code = "method_not_allowed"


class ServerMisconfigurationError(ConversionRelayError):
    """Configuração obrigatória ausente (secret, API key, program id)."""

    status_code = 500
    error_code = "server_misconfiguration"


class UnauthorizedError(ConversionRelayError):
    """Assinatura ausente ou divergente."""

    status_code = 401
    error_code = "unauthorized"


class InvalidPayloadError(ConversionRelayError):
    """Payload inbound não pôde ser convertido em conversão canônica.

    Attributes:
        field: Campo lógico que falhou (ex: "amount")
        reason: Código do motivo (ex: "invalid_amount")
        context: Diagnóstico opcional, sem valores do payload
    """

    status_code = 400
    error_code = "invalid_payload"
    reason: str = "invalid_payload"

    def __init__(
        self,
        field: str | None = None,
        detail: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(detail or self.reason)
        self.field = field
        self.context = context or {}


class InvalidJsonError(InvalidPayloadError):
    """Corpo não é JSON válido ou não é objeto."""

    reason = "invalid_json"


class InvalidAmountError(InvalidPayloadError):
    """Valor total ausente, não numérico ou <= 0."""

    reason = "invalid_amount"


class MissingOrderIdError(InvalidPayloadError):
    """Nenhum identificador de pedido encontrado."""

    reason = "missing_order_id"


class MissingReferralError(InvalidPayloadError):
    """Código de afiliado ausente com política `require`."""

    reason = "missing_referral"


class UpstreamFailureError(ConversionRelayError):
    """Falha na chamada à API de afiliados."""

    status_code = 500
    error_code = "upstream_failure"


class UpstreamTransportError(UpstreamFailureError):
    """Falha de transporte (conexão/timeout) sem resposta HTTP."""
