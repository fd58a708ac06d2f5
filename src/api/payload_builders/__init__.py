"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- tapfiliate/: conversões Tapfiliate (conversions e postback)

Cada API tem seus próprios builders, garantindo SRP.
"""

__all__: list[str] = []
