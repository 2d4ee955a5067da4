"""Montagem do corpo de requisição por operação de pagamento.

Os parâmetros chegam já validados; o builder só acrescenta o
username e troca nomes de constantes (ex: "SALARY") pelo valor de wire.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from app.constants.payments import (
    BankCode,
    Operation,
    Provider,
    Reason,
    TransferType,
)

# Campos enum por nível do payload
_TOP_LEVEL_ENUMS: dict[str, type[Enum]] = {
    "provider": Provider,
    "transferType": TransferType,
}
_RECIPIENT_ENUMS: dict[str, type[Enum]] = {"reason": Reason}
_BANK_ACCOUNT_ENUMS: dict[str, type[Enum]] = {"bankCode": BankCode}


def to_wire_value(enum_cls: type[Enum], value: Any) -> Any:
    """Converte nome de constante para o valor aceito pelo gateway.

    Valores que já são de wire (ou desconhecidos) passam inalterados.
    """
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str) and value in enum_cls.__members__:
        return enum_cls[value].value
    return value


def _shape(entry: Mapping[str, Any], enums: Mapping[str, type[Enum]]) -> dict[str, Any]:
    shaped = dict(entry)
    for name, enum_cls in enums.items():
        if name in shaped:
            shaped[name] = to_wire_value(enum_cls, shaped[name])
    if isinstance(shaped.get("bankAccount"), Mapping):
        shaped["bankAccount"] = _shape(shaped["bankAccount"], _BANK_ACCOUNT_ENUMS)
    return shaped


class PaymentPayloadBuilder:
    """Builder do corpo JSON enviado ao gateway."""

    def build_request_body(
        self,
        operation: Operation,
        params: Mapping[str, Any],
        username: str,
    ) -> dict[str, Any]:
        """Constrói corpo da requisição sem alterar os params de entrada.

        Args:
            operation: Operação de pagamento
            params: Parâmetros aceitos pela validação
            username: Username da conta no gateway

        Returns:
            Corpo JSON com username e valores de wire
        """
        body = _shape(params, _TOP_LEVEL_ENUMS)
        if operation in (Operation.PAY_CONSUMER, Operation.BANK_TRANSFER):
            body["recipients"] = [
                _shape(recipient, _RECIPIENT_ENUMS) for recipient in params["recipients"]
            ]
        body["username"] = username
        return body


def build_request_body(
    operation: Operation,
    params: Mapping[str, Any],
    username: str,
) -> dict[str, Any]:
    """Atalho funcional para PaymentPayloadBuilder.build_request_body."""
    return PaymentPayloadBuilder().build_request_body(operation, params, username)
