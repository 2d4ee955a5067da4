"""Cliente HTTP base para o conector de pagamentos.

Uma tentativa por chamada: retry/backoff ficam fora deste cliente.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import GatewayError

logger = logging.getLogger(__name__)

_RETRYABLE_STATUS = frozenset({429})


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def post(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """POST JSON; falhas de conexão e status transitórios viram GatewayError."""
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TransportError as exc:
            logger.warning("http_connection_error", extra={"url": url})
            raise GatewayError("http_connection_error") from exc

        if response.status_code in _RETRYABLE_STATUS or response.status_code >= 500:
            raise GatewayError(
                "http_transient_status",
                status_code=response.status_code,
                is_permanent=False,
            )
        return response
