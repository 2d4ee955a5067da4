"""Agregador de settings do cliente de pagamentos.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.payments import (
    OPERATION_PATHS,
    PRODUCTION_API_BASE_URL,
    SANDBOX_API_BASE_URL,
    GatewayEnvironment,
    PaymentsSettings,
    get_payments_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "OPERATION_PATHS",
    "PRODUCTION_API_BASE_URL",
    "SANDBOX_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "GatewayEnvironment",
    "PaymentsSettings",
    "get_base_settings",
    "get_payments_settings",
]
