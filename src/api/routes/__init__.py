"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhooks, health)
- Ler body/headers e delegar para o use case
- Traduzir resultados e erros em respostas HTTP

Estrutura:
- routes/fourthwall/: webhook de pedidos Fourthwall
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
