"""Factory de wiring para o cliente de pagamentos (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.connectors.payments import create_payments_http_client
from api.payload_builders.payments import PaymentPayloadBuilder
from api.validators.payments import PaymentRequestValidator
from app.use_cases.payments import PaymentsService
from config.settings import get_payments_settings

if TYPE_CHECKING:
    import httpx

    from config.settings import PaymentsSettings


def create_payments_service(
    settings: PaymentsSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> PaymentsService:
    """Cria PaymentsService com dependências concretas.

    Args:
        settings: PaymentsSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx opcional (testes)
    """
    payments = settings or get_payments_settings()
    return PaymentsService(
        validator=PaymentRequestValidator(),
        builder=PaymentPayloadBuilder(),
        client=create_payments_http_client(payments, transport=transport),
        settings=payments,
    )
