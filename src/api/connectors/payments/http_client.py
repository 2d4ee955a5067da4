"""Cliente HTTP especializado para o gateway de pagamentos.

Estende HttpClient genérico com:
- Header de autenticação apiKey
- Parsing de JSON do response
- Classificação de erros do gateway (permanente vs transitório)
- Logging estruturado sem PII (chaves, telefones, contas)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.payments.gateway_errors import parse_gateway_error
from api.connectors.payments.gateway_logging import log_gateway_error, log_success
from api.connectors.payments.http_base import HttpClient, HttpClientConfig
from utils.errors import GatewayError

if TYPE_CHECKING:
    import httpx

    from config.settings import PaymentsSettings

logger: logging.Logger = logging.getLogger(__name__)


class PaymentsHttpClient(HttpClient):
    """Cliente HTTP para o gateway de pagamentos."""

    async def send_operation(
        self,
        endpoint: str,
        api_key: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]:
        """Envia o corpo de uma operação ao gateway.

        Args:
            endpoint: URL completa da operação
            api_key: Chave da conta (header apiKey)
            payload: Corpo JSON já validado e montado

        Returns:
            Response JSON do gateway

        Raises:
            ValueError: Se api_key está vazia
            GatewayError: Se erro HTTP ou erro reportado pelo gateway
        """
        if not api_key or not api_key.strip():
            logger.error("api_key ausente para send_operation", extra={"endpoint": endpoint})
            raise ValueError(
                "api_key é obrigatória para chamadas ao gateway. "
                "Verifique se PAYMENTS_API_KEY está configurado."
            )

        response = await self.post(endpoint, json=payload, headers=self._build_headers(api_key))
        return self._process_response(response, endpoint)

    @staticmethod
    def _build_headers(api_key: str) -> dict[str, str]:
        return {
            "apiKey": api_key,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _process_response(self, response: httpx.Response, endpoint: str) -> dict[str, Any]:
        try:
            response_data = response.json()
        except ValueError as exc:
            logger.error("Response JSON inválido", extra={"endpoint": endpoint})
            raise GatewayError(
                "invalid_json_response", status_code=response.status_code
            ) from exc

        if not isinstance(response_data, dict):
            raise GatewayError("unexpected_response_shape", status_code=response.status_code)

        gateway_error = parse_gateway_error(response_data, response.status_code)
        if gateway_error:
            log_gateway_error(gateway_error, endpoint)
            raise GatewayError(
                f"Gateway error: {gateway_error.status}: {gateway_error.message}",
                status_code=gateway_error.status_code,
                is_permanent=gateway_error.is_permanent,
            )

        log_success(endpoint, response.status_code)
        return response_data


def create_payments_http_client(
    settings: PaymentsSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PaymentsHttpClient:
    """Factory para criar cliente do gateway com config padrão.

    Args:
        settings: PaymentsSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes)
    """
    # Import local para evitar dependência circular
    from config.settings import get_payments_settings

    payments = settings or get_payments_settings()
    config = HttpClientConfig(timeout_seconds=payments.request_timeout_seconds)
    return PaymentsHttpClient(config=config, transport=transport)
