"""Endpoints de health check e readiness."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.bootstrap import collect_settings_errors

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_NAME = "conversion-relay"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe — configuração do relay completa e válida.

    Só nomes de variáveis aparecem na resposta, nunca valores.
    """
    errors = collect_settings_errors()
    ready = not errors
    if not ready:
        logger.warning("readiness_config_invalid", extra={"error_count": len(errors)})

    payload = {
        "status": "ready" if ready else "not_ready",
        "errors": errors,
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
