"""Modelos de domínio do relay de conversões.

CanonicalConversion é o único formato aceito pelo submitter: a validação
roda na construção, então um registro inválido nunca chega ao outbound.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CanonicalConversion(BaseModel):
    """Conversão normalizada a partir de um pedido inbound."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    external_id: str = Field(..., min_length=1, description="ID do pedido na loja.")
    amount: Decimal = Field(..., gt=0, allow_inf_nan=False, description="Total do pedido.")
    currency: str = Field(default="USD", min_length=3, max_length=3)
    customer_email: str = Field(..., min_length=1)
    referral_code: str | None = Field(
        default=None,
        description="Código de afiliado ou visitor/click id.",
    )
    referral_source: str | None = Field(
        default=None,
        description="Chave de trackingParams que forneceu o referral_code.",
    )
    program_id: str = Field(..., min_length=1, description="Programa Tapfiliate (config).")

    @field_validator("external_id", "customer_email", "program_id")
    @classmethod
    def _strip_required(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be blank")
        return stripped

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.strip().upper()

    @property
    def amount_as_number(self) -> float:
        """Valor numérico para serialização JSON."""
        return float(self.amount)


class IgnoredEvent(BaseModel):
    """Evento válido que não gera conversão (ex: status fora do gate)."""

    model_config = ConfigDict(frozen=True)

    reason: str
    event_type: str | None = None
    status: str | None = None


class SubmissionResult(BaseModel):
    """Resposta da API de afiliados, tratada de forma opaca."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        """True para respostas 2xx."""
        return 200 <= self.status_code < 300
