"""Use case das operações de pagamento.

Cada operação valida os parâmetros, monta o corpo e só então chama
o gateway. Parâmetros rejeitados levantam PaymentValidationError e
nenhuma requisição é feita.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.constants.payments import (
    BankCode,
    Operation,
    Provider,
    Reason,
    TransferType,
)
from app.observability import correlation_scope

if TYPE_CHECKING:
    from app.protocols.http_client import PaymentsHttpClientProtocol
    from app.protocols.payload_builder import PayloadBuilderProtocol
    from app.protocols.validator import PaymentValidatorProtocol
    from config.settings import PaymentsSettings

logger = logging.getLogger(__name__)


class PaymentsService:
    """Orquestra validação, build e envio de cada operação de pagamento."""

    REASON = Reason
    PROVIDER = Provider
    TRANSFER_TYPE = TransferType
    BANK = BankCode

    def __init__(
        self,
        validator: PaymentValidatorProtocol,
        builder: PayloadBuilderProtocol,
        client: PaymentsHttpClientProtocol,
        settings: PaymentsSettings,
    ) -> None:
        self._validator = validator
        self._builder = builder
        self._client = client
        self._settings = settings

    async def execute(self, operation: Operation | str, params: Any) -> dict[str, Any]:
        """Valida e envia uma operação.

        Raises:
            PaymentValidationError: Parâmetros rejeitados (sem chamada de rede)
            UnknownOperationError: Operação sem regras registradas
            GatewayError: Falha de transporte ou erro do gateway
        """
        with correlation_scope():
            result = self._validator.validate(operation, params)
            accepted = result.unwrap()

            body = self._builder.build_request_body(
                result.operation, accepted, self._settings.username
            )
            endpoint = self._settings.get_operation_endpoint(result.operation)
            logger.info(
                "payment_operation_sending", extra={"operation": result.operation.value}
            )
            return await self._client.send_operation(endpoint, self._settings.api_key, body)

    async def checkout(self, params: Any) -> dict[str, Any]:
        """Mobile checkout (C2B)."""
        return await self.execute(Operation.CHECKOUT, params)

    async def pay_consumer(self, params: Any) -> dict[str, Any]:
        """Pagamento B2C para até 10 destinatários."""
        return await self.execute(Operation.PAY_CONSUMER, params)

    async def pay_business(self, params: Any) -> dict[str, Any]:
        """Transferência B2B."""
        return await self.execute(Operation.PAY_BUSINESS, params)

    async def bank_checkout(self, params: Any) -> dict[str, Any]:
        return await self.execute(Operation.BANK_CHECKOUT, params)

    async def validate_bank_checkout(self, params: Any) -> dict[str, Any]:
        """Confirma bank checkout com o OTP recebido pelo cliente."""
        return await self.execute(Operation.VALIDATE_BANK_CHECKOUT, params)

    async def bank_transfer(self, params: Any) -> dict[str, Any]:
        return await self.execute(Operation.BANK_TRANSFER, params)

    async def card_checkout(self, params: Any) -> dict[str, Any]:
        return await self.execute(Operation.CARD_CHECKOUT, params)

    async def validate_card_checkout(self, params: Any) -> dict[str, Any]:
        """Confirma card checkout com o OTP recebido pelo cliente."""
        return await self.execute(Operation.VALIDATE_CARD_CHECKOUT, params)
