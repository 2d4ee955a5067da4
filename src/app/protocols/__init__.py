"""Protocolos e contratos do core da aplicação."""

from .http_client import PaymentsHttpClientProtocol
from .models import ValidationResult, Violation
from .payload_builder import PayloadBuilderProtocol
from .validator import PaymentValidatorProtocol

__all__ = [
    "PaymentValidatorProtocol",
    "PaymentsHttpClientProtocol",
    "PayloadBuilderProtocol",
    "ValidationResult",
    "Violation",
]
