"""Factory para obter o builder correto por formato outbound."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.payload_builders.tapfiliate.conversions import ConversionsPayloadBuilder
from api.payload_builders.tapfiliate.postback import PostbackPayloadBuilder

if TYPE_CHECKING:
    from app.protocols.payload_builder import ConversionPayloadBuilderProtocol

# Mapeamento de formato (TAPFILIATE_OUTBOUND_SHAPE) para builder
_BUILDERS: dict[str, ConversionPayloadBuilderProtocol] = {
    "conversions": ConversionsPayloadBuilder(),
    "postback": PostbackPayloadBuilder(),
}


def get_payload_builder(shape: str) -> ConversionPayloadBuilderProtocol:
    """Retorna o builder para o formato configurado.

    Args:
        shape: conversions|postback

    Raises:
        ValueError: Se o formato não for suportado
    """
    builder = _BUILDERS.get(shape)
    if builder is None:
        raise ValueError(f"Formato outbound não suportado: {shape}")
    return builder
