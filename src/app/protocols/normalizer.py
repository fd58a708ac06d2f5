"""Protocolos de normalização inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.conversion import CanonicalConversion, IgnoredEvent


class OrderNormalizerProtocol(Protocol):
    """Contrato mínimo para converter pedido inbound em conversão canônica.

    Falhas de extração são levantadas como InvalidPayloadError.
    """

    def normalize(self, payload: dict[str, Any]) -> CanonicalConversion | IgnoredEvent: ...
