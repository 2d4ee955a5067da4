"""Builders de payload para o gateway de pagamentos."""

from api.payload_builders.payments.factory import (
    PaymentPayloadBuilder,
    build_request_body,
    to_wire_value,
)

__all__ = [
    "PaymentPayloadBuilder",
    "build_request_body",
    "to_wire_value",
]
