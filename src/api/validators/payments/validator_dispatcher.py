"""Validador de parâmetros de pagamento guiado pelo registro de regras.

Avalia todas as regras sem interromper na primeira falha e devolve
um ValidationResult com a lista completa de violações.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.validators.payments.checks import SCALAR_CHECKS
from api.validators.payments.registry import RULES, get_rules, resolve_operation
from api.validators.payments.rules import FieldKind
from app.constants.payments import ViolationCode
from app.protocols.models import ValidationResult, Violation
from config.logging import log_rejection

if TYPE_CHECKING:
    from api.validators.payments.rules import FieldRule, RuleSet
    from app.constants.payments import Operation

logger = logging.getLogger(__name__)

ROOT_FIELD = "params"


def _is_absent(params: Mapping[str, Any], name: str) -> bool:
    return params.get(name) is None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, list | tuple)


def collect_violations(
    rule_set: RuleSet,
    params: Mapping[str, Any],
    prefix: str = "",
) -> list[Violation]:
    """Avalia um RuleSet contra um mapping já verificado.

    Primeiro reporta campos obrigatórios ausentes, depois checa
    cada campo presente na ordem declarada.
    """
    violations: list[Violation] = [
        Violation(
            field=f"{prefix}{rule.name}",
            code=ViolationCode.MISSING_FIELD,
            message=f"{rule.name} is required",
        )
        for rule in rule_set.required_fields
        if _is_absent(params, rule.name)
    ]

    for rule in rule_set.fields:
        if _is_absent(params, rule.name):
            continue
        violations.extend(_check_field(rule, params[rule.name], f"{prefix}{rule.name}"))

    return violations


def _check_field(rule: FieldRule, value: Any, path: str) -> list[Violation]:
    if rule.kind is FieldKind.DISALLOWED:
        return [
            Violation(
                field=path,
                code=ViolationCode.DISALLOWED_FIELD,
                message=f"{rule.name} is not allowed for this operation",
            )
        ]
    if rule.kind is FieldKind.ENTITY:
        return _check_entity(rule, value, path)
    if rule.kind is FieldKind.ENTITY_LIST:
        return _check_entity_list(rule, value, path)

    message = SCALAR_CHECKS[rule.kind](rule, value)
    if message is None:
        return []
    code = (
        ViolationCode.INVALID_ENUM_VALUE
        if rule.kind is FieldKind.ENUM
        else ViolationCode.TYPE_MISMATCH
    )
    return [Violation(field=path, code=code, message=message)]


def _check_entity(rule: FieldRule, value: Any, path: str) -> list[Violation]:
    if not isinstance(value, Mapping):
        return [
            Violation(
                field=path,
                code=ViolationCode.TYPE_MISMATCH,
                message=f"{rule.name} must be an object",
            )
        ]
    return collect_violations(rule.schema, value, prefix=f"{path}.")


def _check_entity_list(rule: FieldRule, value: Any, path: str) -> list[Violation]:
    if not _is_sequence(value):
        return [
            Violation(
                field=path,
                code=ViolationCode.TYPE_MISMATCH,
                message=f"{rule.name} must be an array",
            )
        ]

    violations: list[Violation] = []
    count = len(value)
    too_few = rule.min_count is not None and count < rule.min_count
    too_many = rule.max_count is not None and count > rule.max_count
    if too_few or too_many:
        violations.append(
            Violation(
                field=path,
                code=ViolationCode.COUNT_OUT_OF_RANGE,
                message=f"{rule.name} must have {_describe_bounds(rule)} items, got {count}",
            )
        )

    for index, item in enumerate(value):
        item_path = f"{path}[{index}]"
        if not isinstance(item, Mapping):
            violations.append(
                Violation(
                    field=item_path,
                    code=ViolationCode.TYPE_MISMATCH,
                    message=f"{rule.schema.name} must be an object",
                )
            )
            continue
        violations.extend(collect_violations(rule.schema, item, prefix=f"{item_path}."))
    return violations


def _describe_bounds(rule: FieldRule) -> str:
    if rule.max_count is None:
        return f"at least {rule.min_count}"
    if rule.min_count is None:
        return f"at most {rule.max_count}"
    return f"between {rule.min_count} and {rule.max_count}"


class PaymentRequestValidator:
    """Valida parâmetros de cada operação de pagamento antes do envio.

    Stateless: o resultado depende apenas de (operação, parâmetros).
    """

    def __init__(self, registry: Mapping[Operation, RuleSet] = RULES) -> None:
        self._registry = registry

    def validate(self, operation: Operation | str, params: Any) -> ValidationResult:
        """Valida parâmetros contra as regras da operação.

        Args:
            operation: Operação (Operation ou seu nome, ex: "checkout")
            params: Parâmetros brutos fornecidos pelo chamador

        Returns:
            ValidationResult aceito (params originais) ou rejeitado

        Raises:
            UnknownOperationError: Se a operação não tem regras
        """
        resolved = resolve_operation(operation)
        rule_set = get_rules(resolved, self._registry)

        if not isinstance(params, Mapping):
            violations = [
                Violation(
                    field=ROOT_FIELD,
                    code=ViolationCode.TYPE_MISMATCH,
                    message=f"{ROOT_FIELD} must be an object",
                )
            ]
        elif not params:
            violations = [
                Violation(
                    field=ROOT_FIELD,
                    code=ViolationCode.MISSING_FIELD,
                    message=f"{ROOT_FIELD} cannot be empty",
                ),
                *collect_violations(rule_set, params),
            ]
        else:
            violations = collect_violations(rule_set, params)

        if violations:
            log_rejection(logger, resolved.value, violations)
            return ValidationResult.reject(resolved, violations)

        logger.debug("payment_params_accepted", extra={"operation": resolved.value})
        return ValidationResult.accept(resolved, params)

    def validate_request(self, operation: Operation | str, params: Any) -> Any:
        """Valida e retorna os parâmetros aceitos.

        Raises:
            PaymentValidationError: Com todas as violações, se rejeitado
            UnknownOperationError: Se a operação não tem regras
        """
        return self.validate(operation, params).unwrap()
