"""Modelos de contrato para validação de requisições de pagamento."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.constants.payments import Operation, ViolationCode
from utils.errors import PaymentValidationError


class Violation(BaseModel):
    """Uma restrição violada por um campo de entrada."""

    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Caminho do campo (ex: recipients[0].amount).")
    code: ViolationCode = Field(..., description="Categoria da restrição violada.")
    message: str = Field(..., description="Descrição legível da violação.")


class ValidationResult(BaseModel):
    """Resultado tudo-ou-nada da validação de uma operação.

    Aceito carrega os parâmetros originais sem transformação;
    rejeitado carrega todas as violações na ordem de avaliação.
    """

    model_config = ConfigDict(frozen=True)

    operation: Operation
    accepted: bool
    params: Any = None
    violations: tuple[Violation, ...] = ()

    @classmethod
    def accept(cls, operation: Operation, params: Any) -> ValidationResult:
        return cls(operation=operation, accepted=True, params=params)

    @classmethod
    def reject(cls, operation: Operation, violations: list[Violation]) -> ValidationResult:
        return cls(operation=operation, accepted=False, violations=tuple(violations))

    @property
    def rejected(self) -> bool:
        return not self.accepted

    @property
    def codes(self) -> list[ViolationCode]:
        return [v.code for v in self.violations]

    def fields_with(self, code: ViolationCode) -> list[str]:
        """Campos que violaram a restrição informada."""
        return [v.field for v in self.violations if v.code == code]

    def unwrap(self) -> Any:
        """Retorna os parâmetros aceitos ou levanta PaymentValidationError."""
        if self.accepted:
            return self.params
        raise PaymentValidationError(self.operation.value, self.violations)
