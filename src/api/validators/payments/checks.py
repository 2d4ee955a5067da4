"""Checagens de forma por FieldKind para campos escalares.

Cada checagem retorna a mensagem de violação ou None quando o valor
é aceito. Nenhuma checagem converte o valor (sem coerção implícita).
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from api.validators.payments.rules import FieldKind

if TYPE_CHECKING:
    from collections.abc import Callable

    from api.validators.payments.rules import FieldRule


def check_string(rule: FieldRule, value: Any) -> str | None:
    shape = rule.shape or "a non-empty string"
    if not isinstance(value, str) or not value.strip():
        return f"{rule.name} must be {shape}"
    if rule.pattern is not None and not rule.pattern.fullmatch(value):
        return f"{rule.name} must be {shape}"
    return None


def check_amount(rule: FieldRule, value: Any) -> str | None:
    # bool é subclasse de int
    if isinstance(value, bool) or not isinstance(value, int | float):
        return f"{rule.name} must be a number"
    if (isinstance(value, float) and not math.isfinite(value)) or value <= 0:
        return f"{rule.name} must be a positive number"
    return None


def check_integer(rule: FieldRule, value: Any) -> str | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return f"{rule.name} must be an integer"
    if rule.min_value is not None and value < rule.min_value:
        return f"{rule.name} must be >= {rule.min_value}"
    if rule.max_value is not None and value > rule.max_value:
        return f"{rule.name} must be <= {rule.max_value}"
    return None


def check_enum(rule: FieldRule, value: Any) -> str | None:
    message = f"{rule.name} must be one of {_describe(rule.allowed)}"
    # float com mesmo hash do IntEnum (234001.0) não é valor de wire
    if isinstance(value, bool) or not isinstance(value, str | int):
        return message
    return None if value in rule.allowed else message


def check_string_map(rule: FieldRule, value: Any) -> str | None:
    if not isinstance(value, Mapping):
        return f"{rule.name} must be a mapping of string keys to string values"
    for key, item in value.items():
        if not isinstance(key, str) or not isinstance(item, str):
            return f"{rule.name} must be a mapping of string keys to string values"
    return None


def _describe(allowed: frozenset[Any]) -> str:
    return ", ".join(sorted(str(item) for item in allowed))


SCALAR_CHECKS: dict[FieldKind, Callable[[FieldRule, Any], str | None]] = {
    FieldKind.STRING: check_string,
    FieldKind.AMOUNT: check_amount,
    FieldKind.INTEGER: check_integer,
    FieldKind.ENUM: check_enum,
    FieldKind.STRING_MAP: check_string_map,
}
