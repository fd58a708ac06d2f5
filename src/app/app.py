"""Aplicação ASGI do relay Fourthwall → Tapfiliate.

    uvicorn app.app:app --host 0.0.0.0 --port 8080

ou, localmente, `conversion-relay` (ver main()).
"""

from __future__ import annotations

import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import SERVICE_NAME, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

# Logging antes de montar a app, para que o startup já saia em JSON
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Valida settings no startup; em staging/production, falha o boot."""
    errors = validate_runtime_settings()
    logger.info("relay_started", extra={"component": SERVICE_NAME, "config_errors": len(errors)})
    yield
    logger.info("relay_stopped", extra={"component": SERVICE_NAME})


def create_app() -> FastAPI:
    """App FastAPI com /webhooks/fourthwall, /health e /ready."""
    base = get_base_settings()
    relay = FastAPI(
        title="Conversion Relay",
        description="Pedidos Fourthwall viram conversões Tapfiliate",
        version="1.0.0",
        debug=base.debug,
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
    )
    relay.include_router(create_api_router())
    return relay


app = create_app()


def main() -> None:
    """Sobe o uvicorn lendo HOST/PORT do ambiente (reload só com DEBUG)."""
    import uvicorn

    uvicorn.run(
        "app.app:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
        reload=get_base_settings().debug,
    )


if __name__ == "__main__":
    main()
