"""Router do Fourthwall — agrega os endpoints do conector."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.fourthwall.webhook import router as webhook_router

router = APIRouter()

router.include_router(webhook_router)
