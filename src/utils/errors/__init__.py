"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    GatewayError,
    PaymentsError,
    PaymentValidationError,
    UnknownOperationError,
)

__all__ = [
    "GatewayError",
    "PaymentValidationError",
    "PaymentsError",
    "UnknownOperationError",
]
