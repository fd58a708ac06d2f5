"""Normalizer Fourthwall — pedidos de loja → conversões canônicas."""

from .extractor import DEFAULT_STRATEGIES, ExtractedOrder, FieldStrategies, extract_order
from .normalizer import FourthwallOrderNormalizer

__all__ = [
    "DEFAULT_STRATEGIES",
    "ExtractedOrder",
    "FieldStrategies",
    "FourthwallOrderNormalizer",
    "extract_order",
]
