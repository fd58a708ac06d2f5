"""Extrator de pedidos Fourthwall.

Cada campo lógico tem uma lista ordenada de paths, cobrindo as
variações de formato do payload entre versões da API. Os paths são
tentados do primeiro ao último; o primeiro valor utilizável vence.

Não faz validação de negócio - apenas extração estrutural.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from ._extraction_helpers import (
    Path,
    find_alias,
    first_amount,
    first_mapping,
    first_text,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True)
class FieldStrategies:
    """Paths por campo lógico, em ordem de prioridade."""

    event_type: tuple[Path, ...] = (("type",), ("event_type",), ("topic",))
    status: tuple[Path, ...] = (
        ("data", "order", "status"),
        ("data", "status"),
        ("status",),
    )
    order_id: tuple[Path, ...] = (
        ("data", "order", "id"),
        ("data", "id"),
        ("data", "friendlyId"),
        ("id",),
    )
    amount: tuple[Path, ...] = (
        ("data", "amounts", "total", "value"),
        ("data", "amounts", "total", "amount"),
        ("data", "order", "amounts", "total", "amount"),
        ("total_price",),
        ("total",),
        ("total_amount",),
        ("amount",),
    )
    currency: tuple[Path, ...] = (
        ("data", "amounts", "total", "currency"),
        ("data", "order", "amounts", "total", "currency"),
        ("data", "currency"),
        ("currency",),
    )
    email: tuple[Path, ...] = (
        ("data", "order", "email"),
        ("data", "email"),
        ("email",),
    )
    tracking_params: tuple[Path, ...] = (
        ("data", "order", "trackingParams"),
        ("data", "trackingParams"),
        ("trackingParams",),
        ("tracking_params",),
    )


DEFAULT_STRATEGIES = FieldStrategies()


@dataclass(frozen=True)
class ExtractedOrder:
    """Valores brutos extraídos, ainda sem defaults nem validação."""

    event_type: str | None
    status: str | None
    order_id: str | None
    amount: Decimal | None
    currency: str | None
    email: str | None
    referral_code: str | None
    referral_source: str | None


def extract_order(
    payload: Mapping[str, Any],
    referral_aliases: tuple[str, ...],
    strategies: FieldStrategies = DEFAULT_STRATEGIES,
) -> ExtractedOrder:
    """Extrai todos os campos lógicos do payload.

    Args:
        payload: Payload do webhook (dict não tipado)
        referral_aliases: Chaves de trackingParams em ordem de prioridade
        strategies: Tabela de paths por campo

    Returns:
        ExtractedOrder com None nos campos ausentes
    """
    tracking = first_mapping(payload, strategies.tracking_params)
    referral_source, referral_code = find_alias(tracking, referral_aliases)
    return ExtractedOrder(
        event_type=first_text(payload, strategies.event_type),
        status=first_text(payload, strategies.status),
        order_id=first_text(payload, strategies.order_id),
        amount=first_amount(payload, strategies.amount),
        currency=first_text(payload, strategies.currency),
        email=first_text(payload, strategies.email),
        referral_code=referral_code,
        referral_source=referral_source,
    )


def describe_keys(payload: Mapping[str, Any]) -> dict[str, list[str]]:
    """Lista chaves recebidas (sem valores) para diagnóstico de erro 400."""
    data = payload.get("data")
    return {
        "received_keys": sorted(str(key) for key in payload),
        "data_keys": sorted(str(key) for key in data) if isinstance(data, dict) else [],
    }
