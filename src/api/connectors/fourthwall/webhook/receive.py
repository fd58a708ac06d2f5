"""Autenticação e parse inicial do webhook Fourthwall (sem PII)."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.fourthwall.signature import SignatureResult, verify_fourthwall_signature
from utils.errors import InvalidJsonError, ServerMisconfigurationError, UnauthorizedError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import FourthwallSettings

logger = logging.getLogger(__name__)

_TEST_MODE_KEYS = ("testMode", "test_mode")


def _decode_payload(raw_body: bytes) -> dict[str, Any]:
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError(detail="invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError(detail="payload_not_object")

    return payload


def _is_test_mode(payload: dict[str, Any] | None) -> bool:
    if not payload:
        return False
    return any(payload.get(key) is True for key in _TEST_MODE_KEYS)


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    settings: FourthwallSettings,
) -> tuple[dict[str, Any], SignatureResult]:
    """Valida assinatura conforme a política e parseia o JSON do webhook.

    Com a política skip-if-test-mode-flag o corpo é lido antes da
    verificação; JSON inválido nesse caso ainda exige assinatura válida.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        settings: FourthwallSettings (secret, header e política)

    Raises:
        ServerMisconfigurationError: Secret ausente com verificação exigida
        UnauthorizedError: Assinatura ausente ou divergente
        InvalidJsonError: JSON inválido ou não objeto

    Returns:
        (payload dict, SignatureResult)
    """
    early_payload: dict[str, Any] | None = None
    early_error: InvalidJsonError | None = None
    if settings.signature_policy == "skip-if-test-mode-flag":
        try:
            early_payload = _decode_payload(raw_body)
        except InvalidJsonError as exc:
            early_error = exc

    result = verify_fourthwall_signature(
        raw_body,
        headers,
        settings.webhook_secret or None,
        header_name=settings.signature_header,
        policy=settings.signature_policy,
        test_mode=_is_test_mode(early_payload),
    )

    if result.skipped:
        logger.warning(
            "webhook_signature_skipped",
            extra={"policy": settings.signature_policy, "reason": result.error},
        )
    elif result.error == "missing_secret":
        raise ServerMisconfigurationError("webhook_secret_not_configured")
    elif not result.valid:
        raise UnauthorizedError(result.error or "invalid_signature")

    if early_error is not None:
        raise early_error
    payload = early_payload if early_payload is not None else _decode_payload(raw_body)
    return payload, result


class FourthwallWebhookParser:
    """Adapter de WebhookParserProtocol ligado a um FourthwallSettings."""

    def __init__(self, settings: FourthwallSettings) -> None:
        self._settings = settings

    def parse(self, raw_body: bytes, headers: Mapping[str, str]) -> dict[str, Any]:
        payload, _ = parse_webhook_request(raw_body, headers, self._settings)
        return payload
