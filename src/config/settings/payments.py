"""Settings do gateway de pagamentos.

Credenciais e endpoints carregados de variáveis de ambiente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from app.constants.payments import Operation

GatewayEnvironment = Literal["sandbox", "production"]

SANDBOX_API_BASE_URL: str = "https://payments.sandbox.africastalking.com"
PRODUCTION_API_BASE_URL: str = "https://payments.africastalking.com"

# Username reservado que sempre aponta para o sandbox
SANDBOX_USERNAME = "sandbox"

# Caminho relativo de cada operação na API
OPERATION_PATHS: dict[Operation, str] = {
    Operation.CHECKOUT: "mobile/checkout/request",
    Operation.PAY_CONSUMER: "mobile/b2c/request",
    Operation.PAY_BUSINESS: "mobile/b2b/request",
    Operation.BANK_CHECKOUT: "bank/checkout/charge",
    Operation.VALIDATE_BANK_CHECKOUT: "bank/checkout/validate",
    Operation.BANK_TRANSFER: "bank/transfer",
    Operation.CARD_CHECKOUT: "card/checkout/charge",
    Operation.VALIDATE_CARD_CHECKOUT: "card/checkout/validate",
}


@dataclass(frozen=True)
class PaymentsSettings:
    """Configurações do gateway de pagamentos.

    Attributes:
        username: Username da conta no gateway
        api_key: Chave enviada no header apiKey
        environment: sandbox|production
        api_base_url: Override da URL base (vazio = derivada do ambiente)
        request_timeout_seconds: Timeout para requisições HTTP
    """

    username: str = ""
    api_key: str = ""
    environment: GatewayEnvironment = "sandbox"
    api_base_url: str = ""
    request_timeout_seconds: float = 30.0

    @property
    def is_sandbox(self) -> bool:
        return self.environment == "sandbox" or self.username == SANDBOX_USERNAME

    @property
    def api_endpoint(self) -> str:
        """URL base efetiva, sem barra final."""
        if self.api_base_url:
            return self.api_base_url.rstrip("/")
        return SANDBOX_API_BASE_URL if self.is_sandbox else PRODUCTION_API_BASE_URL

    def get_operation_endpoint(self, operation: Operation | str) -> str:
        """Retorna URL completa da operação.

        Raises:
            ValueError: Se a operação não existe
        """
        path = OPERATION_PATHS[Operation(operation)]
        return f"{self.api_endpoint}/{path}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do gateway.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.username:
            errors.append("PAYMENTS_USERNAME não configurado")

        if not self.api_key:
            errors.append("PAYMENTS_API_KEY não configurado")

        if self.environment not in ("sandbox", "production"):
            errors.append("PAYMENTS_ENVIRONMENT deve ser 'sandbox' ou 'production'")

        if self.request_timeout_seconds <= 0:
            errors.append("PAYMENTS_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_environment(env_str: str) -> GatewayEnvironment:
    return "production" if env_str.lower() in ("production", "prod", "live") else "sandbox"


def _load_from_env() -> PaymentsSettings:
    """Carrega PaymentsSettings a partir de variáveis de ambiente."""
    return PaymentsSettings(
        username=os.getenv("PAYMENTS_USERNAME", ""),
        api_key=os.getenv("PAYMENTS_API_KEY", ""),
        environment=_parse_environment(os.getenv("PAYMENTS_ENVIRONMENT", "sandbox")),
        api_base_url=os.getenv("PAYMENTS_API_BASE_URL", ""),
        request_timeout_seconds=float(os.getenv("PAYMENTS_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_payments_settings() -> PaymentsSettings:
    """Retorna instância cacheada de PaymentsSettings."""
    return _load_from_env()
