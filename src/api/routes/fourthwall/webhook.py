"""Endpoint de webhook Fourthwall.

Endpoints:
- POST /webhooks/fourthwall: pedido → conversão Tapfiliate
- demais métodos: 405 com `Allow: POST`

A resposta só é produzida após a chamada outbound terminar
(sucesso, erro HTTP ou timeout).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response

from api.routes.fourthwall.responses import (
    build_error_response,
    build_internal_error_response,
    build_outcome_response,
)
from app.bootstrap import get_relay_use_case
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    record_relay_outcome,
    reset_correlation_id,
    set_correlation_id,
)
from utils.errors import ConversionRelayError, InvalidPayloadError

logger = logging.getLogger(__name__)

router = APIRouter()

WEBHOOK_PATH = "/webhooks/fourthwall"

_ROUTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route(WEBHOOK_PATH, methods=_ROUTED_METHODS, response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebimento de pedidos Fourthwall e envio da conversão.

    Returns:
        Resposta traduzida do resultado do relay.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    correlation_id = get_correlation_id()

    try:
        raw_body = await request.body()
        headers = dict(request.headers)

        try:
            outcome = await get_relay_use_case().execute(
                method=request.method,
                raw_body=raw_body,
                headers=headers,
            )
        except ConversionRelayError as exc:
            reason = exc.reason if isinstance(exc, InvalidPayloadError) else exc.error_code
            logger.warning(
                "webhook_rejected",
                extra={
                    "channel": "fourthwall",
                    "status_code": exc.status_code,
                    "reason": reason,
                    "detail": exc.detail,
                },
            )
            record_relay_outcome("rejected", exc.status_code, reason, correlation_id)
            return build_error_response(exc, correlation_id)
        except Exception:
            logger.exception("webhook_processing_failed", extra={"channel": "fourthwall"})
            record_relay_outcome("failed", 500, "internal_error", correlation_id)
            return build_internal_error_response(correlation_id)

        response = build_outcome_response(outcome, correlation_id)
        reason = outcome.ignored.reason if outcome.ignored is not None else None
        record_relay_outcome(outcome.kind, response.status_code, reason, correlation_id)
        return response

    finally:
        reset_correlation_id(token)
