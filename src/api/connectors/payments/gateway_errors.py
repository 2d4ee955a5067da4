"""Erros e helpers de parsing para respostas do gateway de pagamentos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GatewayApiError:
    """Erro retornado pelo gateway de pagamentos."""

    status: str
    status_code: int
    message: str
    is_permanent: bool  # True se erro não é retentável


def is_permanent_error(status_code: int) -> bool:
    """Erros 4xx (exceto 429) são permanentes."""
    return 400 <= status_code < 500 and status_code != 429


def parse_gateway_error(
    response_data: dict[str, Any],
    status_code: int,
) -> GatewayApiError | None:
    """Extrai erro do response do gateway.

    O gateway sinaliza erro via status HTTP 4xx ou via campo
    `errorMessage` no corpo, mesmo com HTTP 200.

    Returns:
        GatewayApiError se houver erro, None se sucesso
    """
    error_message = response_data.get("errorMessage")
    if status_code < 400 and not error_message:
        return None

    return GatewayApiError(
        status=str(response_data.get("status", "Failed")),
        status_code=status_code,
        message=str(error_message or response_data.get("description") or "Unknown error"),
        is_permanent=is_permanent_error(status_code) or status_code < 400,
    )
