"""Factories do relay de conversões (composition root).

As settings são lidas uma vez e passadas por referência; nenhum
componente do pipeline consulta variáveis de ambiente.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.fourthwall.webhook import FourthwallWebhookParser
from api.connectors.tapfiliate import create_tapfiliate_client
from api.normalizers.fourthwall import FourthwallOrderNormalizer
from app.use_cases.conversions import RelayConversionUseCase
from config.settings import (
    get_base_settings,
    get_fourthwall_settings,
    get_tapfiliate_settings,
)

if TYPE_CHECKING:
    import httpx

    from config.settings import BaseSettings, FourthwallSettings, TapfiliateSettings


def create_relay_use_case(
    base: BaseSettings | None = None,
    fourthwall: FourthwallSettings | None = None,
    tapfiliate: TapfiliateSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RelayConversionUseCase:
    """Monta o use case com parser, normalizer e submitter concretos.

    Args:
        base: BaseSettings (default: ambiente)
        fourthwall: FourthwallSettings (default: ambiente)
        tapfiliate: TapfiliateSettings (default: ambiente)
        transport: Transport httpx alternativo (testes)
    """
    base = base or get_base_settings()
    fourthwall = fourthwall or get_fourthwall_settings()
    tapfiliate = tapfiliate or get_tapfiliate_settings()

    return RelayConversionUseCase(
        parser=FourthwallWebhookParser(fourthwall),
        normalizer=FourthwallOrderNormalizer(
            fourthwall,
            program_id=tapfiliate.program_id,
            include_diagnostics=base.include_diagnostics,
        ),
        submitter=create_tapfiliate_client(tapfiliate, transport=transport),
    )
