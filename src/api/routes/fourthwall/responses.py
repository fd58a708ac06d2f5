"""Tradução de resultados do relay em respostas HTTP.

| Resultado                    | Status          |
|------------------------------|-----------------|
| método inválido              | 405 + Allow     |
| configuração ausente         | 500             |
| assinatura inválida          | 401             |
| payload inválido             | 400             |
| evento ignorado              | 200             |
| falha de transporte outbound | 500             |
| outbound não-2xx             | status espelhado|
| sucesso                      | 200             |
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import Response, status
from fastapi.responses import JSONResponse

from app.observability import CORRELATION_ID_HEADER
from app.use_cases.conversions import ALLOWED_METHOD
from utils.errors import (
    ConversionRelayError,
    InvalidPayloadError,
    MethodNotAllowedError,
)

if TYPE_CHECKING:
    from app.use_cases.conversions import RelayOutcome


def _headers(correlation_id: str, extra: dict[str, str] | None = None) -> dict[str, str]:
    headers = {CORRELATION_ID_HEADER: correlation_id}
    if extra:
        headers.update(extra)
    return headers


def build_error_response(exc: ConversionRelayError, correlation_id: str) -> JSONResponse:
    """Converte ConversionRelayError em resposta JSON estável."""
    content: dict[str, Any] = {"error": exc.error_code, "detail": exc.detail}
    extra_headers: dict[str, str] | None = None

    if isinstance(exc, InvalidPayloadError):
        content["reason"] = exc.reason
        if exc.field:
            content["field"] = exc.field
        if exc.context:
            content["context"] = exc.context

    if isinstance(exc, MethodNotAllowedError):
        extra_headers = {"Allow": ALLOWED_METHOD}

    return JSONResponse(
        content=content,
        status_code=exc.status_code,
        headers=_headers(correlation_id, extra_headers),
    )


def build_internal_error_response(correlation_id: str) -> JSONResponse:
    """Resposta para exceção inesperada (sem stack nem detalhes)."""
    return JSONResponse(
        content={"error": "internal_error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        headers=_headers(correlation_id),
    )


def build_outcome_response(outcome: RelayOutcome, correlation_id: str) -> Response:
    """Converte RelayOutcome (ignored, submitted, upstream_rejected) em resposta."""
    if outcome.kind == "ignored" and outcome.ignored is not None:
        return JSONResponse(
            content={
                "success": True,
                "ignored": True,
                "reason": outcome.ignored.reason,
                "event_type": outcome.ignored.event_type,
                "status": outcome.ignored.status,
            },
            status_code=status.HTTP_200_OK,
            headers=_headers(correlation_id),
        )

    submission = outcome.submission
    if submission is None:
        return build_internal_error_response(correlation_id)

    if outcome.kind == "submitted":
        return JSONResponse(
            content={
                "success": True,
                "message": "webhook_processed",
                "tapfiliate": submission.body,
            },
            status_code=status.HTTP_200_OK,
            headers=_headers(correlation_id),
        )

    return _mirror_upstream(submission.status_code, submission.body, correlation_id)


def _mirror_upstream(status_code: int, body: Any, correlation_id: str) -> Response:
    """Repassa status e body da API outbound sem mascarar."""
    if body is None:
        return Response(status_code=status_code, headers=_headers(correlation_id))
    if isinstance(body, str):
        return Response(
            content=body,
            media_type="text/plain",
            status_code=status_code,
            headers=_headers(correlation_id),
        )
    return JSONResponse(content=body, status_code=status_code, headers=_headers(correlation_id))
