"""App — orquestração, casos de uso e infraestrutura do relay.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: caso de uso do relay (inputs/outputs, sem IO direto)
- domain/: modelos canônicos (conversão, evento ignorado, resultado)
- infra/: implementações concretas de IO (HTTP)
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
