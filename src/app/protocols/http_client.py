"""Protocolos HTTP usados pelo app.

Evita dependência direta da camada api.
"""

from __future__ import annotations

from typing import Any, Protocol


class PaymentsHttpClientProtocol(Protocol):
    """Contrato mínimo para cliente HTTP do gateway de pagamentos."""

    async def send_operation(
        self,
        endpoint: str,
        api_key: str,
        payload: dict[str, Any],
    ) -> dict[str, Any]: ...
