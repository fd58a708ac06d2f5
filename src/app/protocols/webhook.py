"""Protocolos de recepção de webhook inbound."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookParserProtocol(Protocol):
    """Contrato para autenticar e parsear o corpo bruto do webhook.

    Levanta UnauthorizedError, ServerMisconfigurationError ou InvalidJsonError.
    """

    def parse(self, raw_body: bytes, headers: Mapping[str, str]) -> dict[str, Any]: ...
