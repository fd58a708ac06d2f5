"""Payload builders Tapfiliate — um por formato de endpoint."""

from .conversions import ConversionsPayloadBuilder
from .factory import get_payload_builder
from .postback import PostbackPayloadBuilder

__all__ = [
    "ConversionsPayloadBuilder",
    "PostbackPayloadBuilder",
    "get_payload_builder",
]
