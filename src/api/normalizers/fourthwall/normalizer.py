"""Normalizer Fourthwall — pedido inbound → CanonicalConversion.

Ordem de processamento:
1. Gate por tipo de evento/status (IgnoredEvent, não é erro)
2. amount (InvalidAmountError)
3. order id (MissingOrderIdError)
4. referral conforme política (forward|require|skip)
5. currency e email com defaults configurados (currency fora do formato
   de três letras também cai no default)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.conversion import CanonicalConversion, IgnoredEvent
from config.logging import log_fallback
from utils.errors import (
    InvalidAmountError,
    InvalidPayloadError,
    MissingOrderIdError,
    MissingReferralError,
    ServerMisconfigurationError,
)
from utils.sanitizer import mask_email

from .extractor import (
    DEFAULT_STRATEGIES,
    ExtractedOrder,
    FieldStrategies,
    describe_keys,
    extract_order,
)

if TYPE_CHECKING:
    from config.settings import FourthwallSettings

logger = logging.getLogger(__name__)

_COMPONENT = "fourthwall_normalizer"


def _is_currency_code(value: str | None) -> bool:
    """Código ISO 4217: exatamente três letras ASCII."""
    return value is not None and len(value) == 3 and value.isascii() and value.isalpha()


class FourthwallOrderNormalizer:
    """Implementação de OrderNormalizerProtocol para pedidos Fourthwall."""

    def __init__(
        self,
        settings: FourthwallSettings,
        program_id: str,
        *,
        include_diagnostics: bool = True,
        strategies: FieldStrategies = DEFAULT_STRATEGIES,
    ) -> None:
        self._settings = settings
        self._program_id = program_id
        self._include_diagnostics = include_diagnostics
        self._strategies = strategies

    def normalize(self, payload: dict[str, Any]) -> CanonicalConversion | IgnoredEvent:
        """Converte o payload em conversão canônica ou evento ignorado.

        Raises:
            InvalidAmountError: total ausente, não numérico ou <= 0
            MissingOrderIdError: nenhum identificador de pedido
            MissingReferralError: sem código de afiliado e política `require`
        """
        extracted = extract_order(payload, self._settings.referral_aliases, self._strategies)

        ignored = self._apply_gate(extracted)
        if ignored is not None:
            return ignored

        context = describe_keys(payload) if self._include_diagnostics else None

        if extracted.amount is None or extracted.amount <= 0:
            raise InvalidAmountError(field="amount", context=context)

        if not extracted.order_id:
            raise MissingOrderIdError(field="external_id", context=context)

        if not extracted.referral_code:
            policy = self._settings.referral_policy
            if policy == "require":
                raise MissingReferralError(field="referral_code", context=context)
            if policy == "skip":
                logger.info(
                    "conversion_skipped_without_referral",
                    extra={"component": _COMPONENT, "order_id": extracted.order_id},
                )
                return IgnoredEvent(
                    reason="missing_referral",
                    event_type=extracted.event_type,
                    status=extracted.status,
                )

        conversion = self._build_conversion(extracted, context)
        logger.info(
            "normalized_order",
            extra={
                "component": _COMPONENT,
                "event_type": extracted.event_type,
                "status": extracted.status,
                "external_id": conversion.external_id,
                "amount": str(conversion.amount),
                "currency": conversion.currency,
                "customer_email": mask_email(conversion.customer_email),
                "referral_source": conversion.referral_source,
                "has_referral": conversion.referral_code is not None,
            },
        )
        return conversion

    def _apply_gate(self, extracted: ExtractedOrder) -> IgnoredEvent | None:
        if not self._settings.gating_enabled:
            return None

        allowed_types = self._settings.allowed_event_types
        if allowed_types and (extracted.event_type or "").upper() not in allowed_types:
            return self._ignored("event_type_not_allowed", extracted)

        allowed_statuses = self._settings.allowed_statuses
        if allowed_statuses and (extracted.status or "").upper() not in allowed_statuses:
            return self._ignored("status_not_allowed", extracted)

        return None

    def _ignored(self, reason: str, extracted: ExtractedOrder) -> IgnoredEvent:
        logger.info(
            "webhook_event_ignored",
            extra={
                "component": _COMPONENT,
                "reason": reason,
                "event_type": extracted.event_type,
                "status": extracted.status,
            },
        )
        return IgnoredEvent(reason=reason, event_type=extracted.event_type, status=extracted.status)

    def _build_conversion(
        self,
        extracted: ExtractedOrder,
        context: dict[str, Any] | None,
    ) -> CanonicalConversion:
        currency = extracted.currency
        if not _is_currency_code(currency):
            if currency:
                logger.info(
                    "currency_code_discarded",
                    extra={"component": _COMPONENT, "received_length": len(currency)},
                )
            currency = self._settings.default_currency
            log_fallback(logger, _COMPONENT, "currency", currency)

        email = extracted.email
        if not email:
            email = self._settings.default_customer_email
            log_fallback(logger, _COMPONENT, "customer_email", email)

        try:
            return CanonicalConversion(
                external_id=extracted.order_id or "",
                amount=extracted.amount,
                currency=currency,
                customer_email=email,
                referral_code=extracted.referral_code,
                referral_source=extracted.referral_source,
                program_id=self._program_id,
            )
        except ValidationError as exc:
            fields = {str(err["loc"][0]) for err in exc.errors() if err.get("loc")}
            if "amount" in fields:
                raise InvalidAmountError(field="amount", context=context) from exc
            if "external_id" in fields:
                raise MissingOrderIdError(field="external_id", context=context) from exc
            if "program_id" in fields:
                raise ServerMisconfigurationError("program_id_not_configured") from exc
            raise InvalidPayloadError(
                field=sorted(fields)[0] if fields else None,
                detail="invalid_conversion",
                context=context,
            ) from exc
