"""Protocolos de envio outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.conversion import CanonicalConversion, SubmissionResult


class ConversionSubmitterProtocol(Protocol):
    """Contrato mínimo para submeter uma conversão à API de afiliados."""

    async def submit(self, conversion: CanonicalConversion) -> SubmissionResult: ...
