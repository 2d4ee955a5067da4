"""Helpers de logging para o gateway de pagamentos (sem PII)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .gateway_errors import GatewayApiError

logger = logging.getLogger(__name__)


def log_gateway_error(gateway_error: GatewayApiError, endpoint: str) -> None:
    """Loga erro do gateway sem expor dados sensíveis."""
    logger.warning(
        "Erro do gateway de pagamentos",
        extra={
            "endpoint": endpoint,
            "gateway_status": gateway_error.status,
            "status_code": gateway_error.status_code,
            "is_permanent": gateway_error.is_permanent,
        },
    )


def log_success(endpoint: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "Chamada ao gateway bem-sucedida",
        extra={
            "endpoint": endpoint,
            "status_code": status_code,
        },
    )
