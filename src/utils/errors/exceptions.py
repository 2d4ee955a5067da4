"""Exceções de domínio do cliente de pagamentos."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.models import Violation


class PaymentsError(Exception):
    """Base para erros do cliente de pagamentos."""


class PaymentValidationError(PaymentsError):
    """Parâmetros rejeitados antes do envio.

    Carrega todas as violações encontradas, não apenas a primeira.
    """

    def __init__(self, operation: str, violations: Sequence[Violation]) -> None:
        self.operation = operation
        self.violations = tuple(violations)
        details = "; ".join(f"{v.field}: {v.message}" for v in self.violations)
        super().__init__(f"invalid params for {operation}: {details}")

    @property
    def codes(self) -> list[str]:
        """Códigos das violações, na ordem em que foram encontradas."""
        return [v.code for v in self.violations]


class UnknownOperationError(PaymentsError, LookupError):
    """Operação sem regras registradas (erro de programação)."""

    def __init__(self, operation: object) -> None:
        self.operation = operation
        super().__init__(f"no rules registered for operation {operation!r}")


class GatewayError(PaymentsError):
    """Falha de transporte ou erro retornado pelo gateway, sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_permanent: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_permanent = is_permanent
