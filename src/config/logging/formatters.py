"""Formatter JSON (python-json-logger) do relay.

Toda linha carrega os campos de REQUIRED_LOG_FIELDS mais o que vier em
`extra`. `levelname` e `name` saem como `level` e `logger`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Monta o JsonFormatter usado pelo handler raiz.

    Exemplo de linha:
        {"asctime": "2026-10-19 12:00:00,000", "level": "INFO",
         "logger": "api.connectors.tapfiliate.api_logging",
         "message": "conversion_submitted", "correlation_id": "c0ffee",
         "service": "conversion_relay", "status_code": 200}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in REQUIRED_LOG_FIELDS),
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
