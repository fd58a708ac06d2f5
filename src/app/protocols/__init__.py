"""Protocolos e contratos do core da aplicação."""

from .normalizer import OrderNormalizerProtocol
from .outbound_sender import ConversionSubmitterProtocol
from .payload_builder import ConversionPayloadBuilderProtocol
from .webhook import WebhookParserProtocol

__all__ = [
    "ConversionPayloadBuilderProtocol",
    "ConversionSubmitterProtocol",
    "OrderNormalizerProtocol",
    "WebhookParserProtocol",
]
