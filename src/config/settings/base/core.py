"""Settings comuns ao processo (ambiente, serviço, logging).

Também expõe os parsers de variáveis de ambiente usados pelas
settings de cada conector.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUTHY = ("true", "1", "yes", "on")


@dataclass(frozen=True)
class BaseSettings:
    """Settings do processo.

    Attributes:
        environment: development|staging|production
        service_name: Campo `service` dos logs
        log_level: Nível do root logger
        debug: Modo debug
        include_diagnostics: Lista chaves recebidas nas respostas 400
    """

    environment: Environment = "development"
    service_name: str = "conversion-relay"
    log_level: str = "INFO"
    debug: bool = False
    include_diagnostics: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def strict_validation(self) -> bool:
        """Staging e produção não sobem com configuração inválida."""
        return self.environment in ("staging", "production")

    def validate(self) -> list[str]:
        """Retorna a lista de erros (vazia = OK)."""
        errors: list[str] = []
        if self.environment not in ("development", "staging", "production"):
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL inválido: {self.log_level}")
        return errors


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Lê flag de env ("true", "1", "yes", "on"); vazio usa o default."""
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def parse_csv(value: str | None) -> tuple[str, ...]:
    """Lista separada por vírgula → tupla, descartando itens vazios."""
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_environment(raw: str) -> Environment:
    """Nome de ambiente desconhecido cai em development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


def _load_base_from_env() -> BaseSettings:
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "conversion-relay"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=parse_bool(os.getenv("DEBUG")),
        include_diagnostics=parse_bool(
            os.getenv("RELAY_INCLUDE_DIAGNOSTICS"), default=True
        ),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """BaseSettings do ambiente, carregadas uma vez."""
    return _load_base_from_env()
