"""Cliente HTTP especializado para a API Tapfiliate.

Estende HttpClient genérico com comportamentos da Tapfiliate:
- Formato do endpoint selecionável (conversions|postback) via builder
- Header de API key conforme o formato (Api-Key ou X-Api-Key)
- Status e body da resposta devolvidos sem reinterpretação
- Logging estruturado sem API key nem email
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING, Any

from api.connectors.tapfiliate.api_logging import log_api_error, log_success
from api.payload_builders.tapfiliate import get_payload_builder
from app.domain.conversion import SubmissionResult
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.observability import get_correlation_id, record_latency
from utils.errors import ServerMisconfigurationError, UpstreamTransportError

if TYPE_CHECKING:
    import httpx

    from app.domain.conversion import CanonicalConversion
    from app.protocols.payload_builder import ConversionPayloadBuilderProtocol
    from config.settings import TapfiliateSettings

logger: logging.Logger = logging.getLogger(__name__)


class TapfiliateHttpClient(HttpClient):
    """Implementação de ConversionSubmitterProtocol sobre a API Tapfiliate.

    Exatamente uma conversão lógica por chamada de submit().
    """

    def __init__(
        self,
        settings: TapfiliateSettings,
        builder: ConversionPayloadBuilderProtocol,
        config: HttpClientConfig | None = None,
    ) -> None:
        super().__init__(config)
        self._settings = settings
        self._builder = builder

    @property
    def endpoint(self) -> str:
        """URL completa do endpoint selecionado."""
        return self._settings.get_endpoint(self._builder.path)

    async def submit(self, conversion: CanonicalConversion) -> SubmissionResult:
        """Envia a conversão e devolve status + body parseado.

        Raises:
            ServerMisconfigurationError: Se api_key estiver vazia
            UpstreamTransportError: Falha de conexão/timeout sem resposta
        """
        api_key = self._settings.api_key
        if not api_key or not api_key.strip():
            logger.error("tapfiliate_api_key_missing", extra={"endpoint": self.endpoint})
            raise ServerMisconfigurationError("tapfiliate_api_key_not_configured")

        endpoint = self.endpoint
        payload = self._builder.build_payload(conversion)
        headers = self._builder.build_headers(api_key)

        started_at = time.perf_counter()
        try:
            response = await self.post(endpoint, json=payload, headers=headers)
        except HttpError as exc:
            logger.error(
                "tapfiliate_transport_failed",
                extra={
                    "endpoint": endpoint,
                    "error": str(exc),
                    "external_id": conversion.external_id,
                },
            )
            raise UpstreamTransportError(str(exc)) from exc
        finally:
            record_latency(
                "tapfiliate",
                "create_conversion",
                (time.perf_counter() - started_at) * 1000,
                get_correlation_id(),
            )

        result = SubmissionResult(
            status_code=response.status_code,
            body=_parse_body(response),
        )
        if result.ok:
            log_success(endpoint, result.status_code, conversion.external_id)
        else:
            log_api_error(endpoint, result.status_code, conversion.external_id)
        return result


def _parse_body(response: httpx.Response) -> Any:
    """JSON quando possível; senão o texto bruto (ou None se vazio)."""
    if not response.content:
        return None
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return response.text


def create_tapfiliate_client(
    settings: TapfiliateSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TapfiliateHttpClient:
    """Factory para criar cliente Tapfiliate com config das settings.

    Args:
        settings: TapfiliateSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes)

    Returns:
        Cliente configurado com o builder do formato escolhido.
    """
    # Import local para evitar dependência circular
    from config.settings import get_tapfiliate_settings

    tapfiliate = settings or get_tapfiliate_settings()
    config = HttpClientConfig(
        timeout_seconds=tapfiliate.request_timeout_seconds,
        max_retries=tapfiliate.max_retries,
        backoff_base_seconds=tapfiliate.backoff_base_seconds,
        transport=transport,
    )
    return TapfiliateHttpClient(
        settings=tapfiliate,
        builder=get_payload_builder(tapfiliate.outbound_shape),
        config=config,
    )
