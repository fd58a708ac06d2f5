"""Use case do relay: webhook de pedido → conversão de afiliado.

Pipeline linear, uma request por vez, sem estado compartilhado:
método → assinatura/parse → normalização → uma chamada outbound.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from app.domain.conversion import CanonicalConversion, IgnoredEvent, SubmissionResult
from utils.errors import MethodNotAllowedError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.protocols import (
        ConversionSubmitterProtocol,
        OrderNormalizerProtocol,
        WebhookParserProtocol,
    )

logger = logging.getLogger(__name__)

ALLOWED_METHOD = "POST"

OutcomeKind = Literal["submitted", "ignored", "upstream_rejected"]


@dataclass(frozen=True)
class RelayOutcome:
    """Resultado de um webhook que chegou ao fim do pipeline.

    Falhas anteriores ao outbound são levantadas como ConversionRelayError.
    """

    kind: OutcomeKind
    conversion: CanonicalConversion | None = None
    ignored: IgnoredEvent | None = None
    submission: SubmissionResult | None = None


class RelayConversionUseCase:
    """Orquestra autenticação, normalização e envio da conversão."""

    def __init__(
        self,
        parser: WebhookParserProtocol,
        normalizer: OrderNormalizerProtocol,
        submitter: ConversionSubmitterProtocol,
    ) -> None:
        self._parser = parser
        self._normalizer = normalizer
        self._submitter = submitter

    async def execute(
        self,
        *,
        method: str,
        raw_body: bytes,
        headers: Mapping[str, str],
    ) -> RelayOutcome:
        """Processa um webhook inbound.

        Raises:
            MethodNotAllowedError: método diferente de POST
            ServerMisconfigurationError: secret/credenciais ausentes
            UnauthorizedError: assinatura inválida
            InvalidPayloadError: JSON inválido ou campos obrigatórios ausentes
            UpstreamTransportError: falha de transporte no outbound
        """
        if method.upper() != ALLOWED_METHOD:
            raise MethodNotAllowedError(f"method {method.upper()} not allowed")

        payload = self._parser.parse(raw_body, headers)
        logger.info(
            "webhook_received",
            extra={
                "payload_size": len(raw_body),
                "event_id": payload.get("id") if isinstance(payload.get("id"), str) else None,
            },
        )

        result = self._normalizer.normalize(payload)
        if isinstance(result, IgnoredEvent):
            return RelayOutcome(kind="ignored", ignored=result)

        submission = await self._submitter.submit(result)
        kind: OutcomeKind = "submitted" if submission.ok else "upstream_rejected"
        return RelayOutcome(kind=kind, conversion=result, submission=submission)
