"""Settings específicas do webhook Fourthwall.

Assinatura HMAC, políticas de verificação, gating de eventos
e regras de extração do código de afiliado.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from config.settings.base.core import parse_csv

SignaturePolicy = Literal["required", "skip-if-unconfigured", "skip-if-test-mode-flag"]
ReferralPolicy = Literal["forward", "require", "skip"]

SIGNATURE_POLICIES: tuple[str, ...] = (
    "required",
    "skip-if-unconfigured",
    "skip-if-test-mode-flag",
)
INSECURE_SIGNATURE_POLICIES = frozenset({"skip-if-unconfigured", "skip-if-test-mode-flag"})
REFERRAL_POLICIES: tuple[str, ...] = ("forward", "require", "skip")

DEFAULT_SIGNATURE_HEADER = "x-fourthwall-hmac-sha256"
DEFAULT_CURRENCY = "USD"
DEFAULT_CUSTOMER_EMAIL = "unknown_email@example.com"

# Ordem de prioridade: código explícito de afiliado antes de click/visitor id e UTM
DEFAULT_REFERRAL_ALIASES: tuple[str, ...] = (
    "ref",
    "tap_ref",
    "referral_code",
    "affiliate",
    "affiliate_id",
    "tapfiliate_click_id",
    "visitor_id",
    "utm_term",
    "utm_source",
    "utm_medium",
)


@dataclass(frozen=True)
class FourthwallSettings:
    """Configurações do webhook Fourthwall.

    Attributes:
        webhook_secret: Secret para validação HMAC-SHA256 (base64)
        signature_header: Header que carrega a assinatura
        signature_policy: required|skip-if-unconfigured|skip-if-test-mode-flag
        referral_policy: forward|require|skip quando não há código de afiliado
        referral_aliases: Chaves de trackingParams, em ordem de prioridade
        allowed_event_types: Tipos de evento processados (vazio = todos)
        allowed_statuses: Status de pedido processados (vazio = todos)
        default_currency: Moeda usada quando o payload não informa
        default_customer_email: Email sentinela quando o payload não informa
    """

    webhook_secret: str = ""
    signature_header: str = DEFAULT_SIGNATURE_HEADER
    signature_policy: SignaturePolicy = "required"

    referral_policy: ReferralPolicy = "forward"
    referral_aliases: tuple[str, ...] = DEFAULT_REFERRAL_ALIASES

    allowed_event_types: frozenset[str] = frozenset()
    allowed_statuses: frozenset[str] = frozenset()

    default_currency: str = DEFAULT_CURRENCY
    default_customer_email: str = DEFAULT_CUSTOMER_EMAIL

    @property
    def is_insecure_signature_policy(self) -> bool:
        """True para políticas que podem pular a verificação HMAC."""
        return self.signature_policy in INSECURE_SIGNATURE_POLICIES

    @property
    def gating_enabled(self) -> bool:
        """True se há filtro por tipo de evento ou status."""
        return bool(self.allowed_event_types or self.allowed_statuses)

    def validate(self) -> list[str]:
        """Valida configurações do webhook.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.signature_policy not in SIGNATURE_POLICIES:
            errors.append(
                "FOURTHWALL_SIGNATURE_POLICY deve ser um de: "
                f"{', '.join(SIGNATURE_POLICIES)}"
            )

        if self.signature_policy == "required" and not self.webhook_secret:
            errors.append(
                "FOURTHWALL_WEBHOOK_SECRET obrigatório com FOURTHWALL_SIGNATURE_POLICY=required"
            )

        if self.referral_policy not in REFERRAL_POLICIES:
            errors.append(
                f"FOURTHWALL_REFERRAL_POLICY deve ser um de: {', '.join(REFERRAL_POLICIES)}"
            )

        if not self.signature_header:
            errors.append("FOURTHWALL_SIGNATURE_HEADER não pode ser vazio")

        if not self.referral_aliases:
            errors.append("FOURTHWALL_REFERRAL_ALIASES não pode ser vazio")

        return errors


def _normalize_policy(value: str) -> str:
    """Aceita `skip_if_unconfigured` e `SKIP-IF-UNCONFIGURED` como sinônimos."""
    return value.strip().lower().replace("_", "-")


def _load_from_env() -> FourthwallSettings:
    """Carrega FourthwallSettings a partir de variáveis de ambiente."""
    aliases = parse_csv(os.getenv("FOURTHWALL_REFERRAL_ALIASES"))
    return FourthwallSettings(
        webhook_secret=os.getenv("FOURTHWALL_WEBHOOK_SECRET", ""),
        signature_header=os.getenv(
            "FOURTHWALL_SIGNATURE_HEADER", DEFAULT_SIGNATURE_HEADER
        ).lower(),
        signature_policy=_normalize_policy(  # type: ignore[arg-type]
            os.getenv("FOURTHWALL_SIGNATURE_POLICY", "required")
        ),
        referral_policy=_normalize_policy(  # type: ignore[arg-type]
            os.getenv("FOURTHWALL_REFERRAL_POLICY", "forward")
        ),
        referral_aliases=aliases or DEFAULT_REFERRAL_ALIASES,
        allowed_event_types=frozenset(
            item.upper() for item in parse_csv(os.getenv("FOURTHWALL_ALLOWED_EVENT_TYPES"))
        ),
        allowed_statuses=frozenset(
            item.upper() for item in parse_csv(os.getenv("FOURTHWALL_ALLOWED_STATUSES"))
        ),
        default_currency=os.getenv("FOURTHWALL_DEFAULT_CURRENCY", DEFAULT_CURRENCY).upper(),
        default_customer_email=os.getenv(
            "FOURTHWALL_DEFAULT_EMAIL", DEFAULT_CUSTOMER_EMAIL
        ),
    )


@lru_cache(maxsize=1)
def get_fourthwall_settings() -> FourthwallSettings:
    """Retorna instância cacheada de FourthwallSettings."""
    return _load_from_env()
