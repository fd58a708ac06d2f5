"""Connectors — adapters de borda para APIs externas.

Estrutura:
- fourthwall/: webhooks de pedidos (inbound, assinatura HMAC)
- tapfiliate/: API de conversões (outbound)

Cada API tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
