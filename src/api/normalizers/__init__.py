"""Normalizers — conversão de payloads externos para modelos internos.

Estrutura:
- fourthwall/: pedidos Fourthwall → CanonicalConversion

Cada origem tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .fourthwall import FourthwallOrderNormalizer, extract_order

__all__ = [
    "FourthwallOrderNormalizer",
    "extract_order",
]
