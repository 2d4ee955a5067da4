"""Conector HTTP do gateway de pagamentos."""

from api.connectors.payments.gateway_errors import GatewayApiError, parse_gateway_error
from api.connectors.payments.http_base import HttpClient, HttpClientConfig
from api.connectors.payments.http_client import (
    PaymentsHttpClient,
    create_payments_http_client,
)

__all__ = [
    "GatewayApiError",
    "HttpClient",
    "HttpClientConfig",
    "PaymentsHttpClient",
    "create_payments_http_client",
    "parse_gateway_error",
]
