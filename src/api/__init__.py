"""API — camada de borda e adapters externos.

Responsabilidades:
- Receber webhooks Fourthwall e validar assinatura
- Normalizar pedidos em conversões canônicas
- Construir payloads e chamar a API Tapfiliate
- Traduzir resultados em respostas HTTP

Subpastas:
- connectors/: adapters HTTP por API (fourthwall, tapfiliate)
- normalizers/: payload externo → modelos internos
- payload_builders/: construção de payloads outbound
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: orquestração de use cases.
"""
