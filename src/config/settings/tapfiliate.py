"""Settings específicas da API Tapfiliate.

Credenciais, endpoint e formato do payload outbound de conversões.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

# Constantes da API Tapfiliate
TAPFILIATE_API_VERSION: str = "1.6"
TAPFILIATE_API_BASE_URL: str = "https://api.tapfiliate.com"

OutboundShape = Literal["conversions", "postback"]

_VALID_SHAPES = ("conversions", "postback")
_MAX_RETRIES_CAP = 3


@dataclass(frozen=True)
class TapfiliateSettings:
    """Configurações do conector Tapfiliate.

    Attributes:
        api_key: Chave da API (header Api-Key ou X-Api-Key)
        program_id: Programa de afiliados que recebe as conversões
        api_base_url: URL base da API
        api_version: Versão no path (ex: 1.6)
        outbound_shape: Formato do payload (conversions|postback)
        request_timeout_seconds: Timeout da chamada outbound
        max_retries: Tentativas extras em falha de conexão
        backoff_base_seconds: Base do backoff exponencial
    """

    api_key: str = ""
    program_id: str = ""

    api_base_url: str = TAPFILIATE_API_BASE_URL
    api_version: str = TAPFILIATE_API_VERSION
    outbound_shape: OutboundShape = "conversions"

    request_timeout_seconds: float = 10.0
    max_retries: int = 1
    backoff_base_seconds: float = 0.5

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}"

    def get_endpoint(self, path: str) -> str:
        """Retorna URL completa para o path informado.

        Args:
            path: Path relativo (ex: "conversions/")

        Returns:
            URL no formato: https://api.tapfiliate.com/1.6/conversions/
        """
        return f"{self.api_endpoint}/{path.lstrip('/')}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Tapfiliate.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("TAPFILIATE_API_KEY não configurado")

        if not self.program_id:
            errors.append("TAPFILIATE_PROGRAM_ID não configurado")

        if self.outbound_shape not in _VALID_SHAPES:
            errors.append(
                "TAPFILIATE_OUTBOUND_SHAPE deve ser 'conversions' ou 'postback'"
            )

        if self.request_timeout_seconds <= 0:
            errors.append("TAPFILIATE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if not 0 <= self.max_retries <= _MAX_RETRIES_CAP:
            errors.append(f"TAPFILIATE_MAX_RETRIES deve estar entre 0 e {_MAX_RETRIES_CAP}")

        return errors


def _load_from_env() -> TapfiliateSettings:
    """Carrega TapfiliateSettings a partir de variáveis de ambiente."""
    return TapfiliateSettings(
        api_key=os.getenv("TAPFILIATE_API_KEY", ""),
        program_id=os.getenv("TAPFILIATE_PROGRAM_ID", ""),
        api_base_url=os.getenv("TAPFILIATE_API_BASE_URL", TAPFILIATE_API_BASE_URL),
        api_version=os.getenv("TAPFILIATE_API_VERSION", TAPFILIATE_API_VERSION),
        outbound_shape=os.getenv("TAPFILIATE_OUTBOUND_SHAPE", "conversions").lower(),  # type: ignore[arg-type]
        request_timeout_seconds=float(
            os.getenv("TAPFILIATE_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        max_retries=int(os.getenv("TAPFILIATE_MAX_RETRIES", "1")),
        backoff_base_seconds=float(os.getenv("TAPFILIATE_BACKOFF_BASE_SECONDS", "0.5")),
    )


@lru_cache(maxsize=1)
def get_tapfiliate_settings() -> TapfiliateSettings:
    """Retorna instância cacheada de TapfiliateSettings."""
    return _load_from_env()
