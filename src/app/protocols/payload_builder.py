"""Protocolos de construção de payload outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.conversion import CanonicalConversion


class ConversionPayloadBuilderProtocol(Protocol):
    """Contrato para um formato de endpoint de conversão.

    Cada implementação define path, header de autenticação e body.
    """

    path: str

    def build_headers(self, api_key: str) -> dict[str, str]: ...

    def build_payload(self, conversion: CanonicalConversion) -> dict[str, Any]: ...
