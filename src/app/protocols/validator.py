"""Protocolos de validação de parâmetros de pagamento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.constants.payments import Operation

    from .models import ValidationResult


class PaymentValidatorProtocol(Protocol):
    """Contrato mínimo para validação de parâmetros antes do envio."""

    def validate(self, operation: Operation | str, params: Any) -> ValidationResult: ...
