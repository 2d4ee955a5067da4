"""Regras declarativas de campos para validação de pagamentos.

Cada campo é descrito por um FieldRule com um FieldKind; o mesmo
RuleSet alimenta a validação e pode alimentar documentação.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import re


class FieldKind(StrEnum):
    """Formas aceitas para um campo."""

    STRING = "string"
    AMOUNT = "amount"
    INTEGER = "integer"
    ENUM = "enum"
    STRING_MAP = "string_map"
    ENTITY = "entity"
    ENTITY_LIST = "entity_list"
    DISALLOWED = "disallowed"


@dataclass(frozen=True)
class FieldRule:
    """Restrição de um único campo.

    Attributes:
        name: Nome do campo no contrato público (ex: phoneNumber)
        kind: Forma esperada
        required: Se ausência é violação
        pattern: Regex aplicada a campos STRING
        shape: Descrição da forma usada nas mensagens (ex: "a phone number")
        allowed: Valores aceitos para campos ENUM
        schema: RuleSet aplicado a ENTITY e a cada item de ENTITY_LIST
        min_count: Tamanho mínimo de ENTITY_LIST
        max_count: Tamanho máximo de ENTITY_LIST
        min_value: Limite inferior de INTEGER
        max_value: Limite superior de INTEGER
    """

    name: str
    kind: FieldKind
    required: bool = False
    pattern: re.Pattern[str] | None = None
    shape: str = ""
    allowed: frozenset[Any] = frozenset()
    schema: RuleSet | None = None
    min_count: int | None = None
    max_count: int | None = None
    min_value: int | None = None
    max_value: int | None = None

    def __post_init__(self) -> None:
        if self.kind in (FieldKind.ENTITY, FieldKind.ENTITY_LIST) and self.schema is None:
            raise ValueError(f"{self.name}: {self.kind} rule requires a schema")


@dataclass(frozen=True)
class RuleSet:
    """Conjunto ordenado de regras de uma operação ou sub-entidade."""

    name: str
    fields: tuple[FieldRule, ...]

    @property
    def required_fields(self) -> tuple[FieldRule, ...]:
        return tuple(rule for rule in self.fields if rule.required)

    def get(self, name: str) -> FieldRule | None:
        for rule in self.fields:
            if rule.name == name:
                return rule
        return None


def required(name: str, kind: FieldKind = FieldKind.STRING, **options: Any) -> FieldRule:
    return FieldRule(name=name, kind=kind, required=True, **options)


def optional(name: str, kind: FieldKind = FieldKind.STRING, **options: Any) -> FieldRule:
    return FieldRule(name=name, kind=kind, required=False, **options)


def disallowed(name: str) -> FieldRule:
    return FieldRule(name=name, kind=FieldKind.DISALLOWED)


def enum_values(enum_cls: type[Enum]) -> frozenset[Any]:
    """Valores aceitos de um enum: nome da constante ou valor de wire."""
    return frozenset(
        [member.name for member in enum_cls] + [member.value for member in enum_cls]
    )
