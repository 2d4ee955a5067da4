"""Registro de regras por operação de pagamento.

Os RuleSets são montados uma vez no import e expostos somente leitura.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from api.validators.payments.limits import (
    CARD_NUMBER_PATTERN,
    COUNTRY_CODE_PATTERN,
    CURRENCY_CODE_PATTERN,
    DATE_PATTERN,
    MAX_EXPIRY_MONTH,
    MAX_RECIPIENTS,
    MIN_BANK_RECIPIENTS,
    MIN_EXPIRY_MONTH,
    MIN_RECIPIENTS,
    PHONE_NUMBER_PATTERN,
)
from api.validators.payments.rules import (
    FieldKind,
    FieldRule,
    RuleSet,
    disallowed,
    enum_values,
    optional,
    required,
)
from app.constants.payments import BankCode, Operation, Provider, Reason, TransferType
from utils.errors import UnknownOperationError

if TYPE_CHECKING:
    from collections.abc import Mapping


def _product_name() -> FieldRule:
    return required("productName", shape="a non-empty string")


def _phone_number() -> FieldRule:
    return required("phoneNumber", pattern=PHONE_NUMBER_PATTERN, shape="a phone number")


def _currency_code() -> FieldRule:
    return required(
        "currencyCode", pattern=CURRENCY_CODE_PATTERN, shape="a 3-letter currency code"
    )


def _amount() -> FieldRule:
    return required("amount", FieldKind.AMOUNT)


def _metadata() -> FieldRule:
    return optional("metadata", FieldKind.STRING_MAP)


def _otp_rules(name: str) -> RuleSet:
    return RuleSet(name=name, fields=(required("transactionId"), required("otp")))


RECIPIENT_RULES = RuleSet(
    name="recipient",
    fields=(
        _phone_number(),
        _currency_code(),
        _amount(),
        optional("reason", FieldKind.ENUM, allowed=enum_values(Reason)),
        optional("name"),
        optional("providerChannel"),
        _metadata(),
    ),
)

BANK_ACCOUNT_RULES = RuleSet(
    name="bankAccount",
    fields=(
        required("accountNumber"),
        required("bankCode", FieldKind.ENUM, allowed=enum_values(BankCode)),
        optional("accountName"),
        optional("dateOfBirth", pattern=DATE_PATTERN, shape="a YYYY-MM-DD date"),
    ),
)

BANK_RECIPIENT_RULES = RuleSet(
    name="bankRecipient",
    fields=(
        required("bankAccount", FieldKind.ENTITY, schema=BANK_ACCOUNT_RULES),
        _currency_code(),
        _amount(),
        required("narration"),
        _metadata(),
    ),
)

PAYMENT_CARD_RULES = RuleSet(
    name="paymentCard",
    fields=(
        required("number", pattern=CARD_NUMBER_PATTERN, shape="a card number"),
        required("cvvNumber", FieldKind.INTEGER, min_value=0),
        required(
            "expiryMonth",
            FieldKind.INTEGER,
            min_value=MIN_EXPIRY_MONTH,
            max_value=MAX_EXPIRY_MONTH,
        ),
        required("expiryYear", FieldKind.INTEGER, min_value=0),
        required("countryCode", pattern=COUNTRY_CODE_PATTERN, shape="a 2-letter country code"),
        required("authToken"),
    ),
)

_RULES: dict[Operation, RuleSet] = {
    Operation.CHECKOUT: RuleSet(
        name=Operation.CHECKOUT,
        fields=(
            _product_name(),
            _phone_number(),
            _currency_code(),
            _amount(),
            optional("providerChannel"),
            _metadata(),
        ),
    ),
    Operation.PAY_CONSUMER: RuleSet(
        name=Operation.PAY_CONSUMER,
        fields=(
            _product_name(),
            required(
                "recipients",
                FieldKind.ENTITY_LIST,
                schema=RECIPIENT_RULES,
                min_count=MIN_RECIPIENTS,
                max_count=MAX_RECIPIENTS,
            ),
        ),
    ),
    Operation.PAY_BUSINESS: RuleSet(
        name=Operation.PAY_BUSINESS,
        fields=(
            _product_name(),
            required("provider", FieldKind.ENUM, allowed=enum_values(Provider)),
            required("transferType", FieldKind.ENUM, allowed=enum_values(TransferType)),
            _currency_code(),
            _amount(),
            required("destinationChannel"),
            required("destinationAccount"),
            _metadata(),
        ),
    ),
    Operation.BANK_CHECKOUT: RuleSet(
        name=Operation.BANK_CHECKOUT,
        fields=(
            _product_name(),
            required("bankAccount", FieldKind.ENTITY, schema=BANK_ACCOUNT_RULES),
            _currency_code(),
            _amount(),
            required("narration"),
            _metadata(),
        ),
    ),
    Operation.VALIDATE_BANK_CHECKOUT: _otp_rules(Operation.VALIDATE_BANK_CHECKOUT),
    Operation.BANK_TRANSFER: RuleSet(
        name=Operation.BANK_TRANSFER,
        fields=(
            _product_name(),
            required(
                "recipients",
                FieldKind.ENTITY_LIST,
                schema=BANK_RECIPIENT_RULES,
                min_count=MIN_BANK_RECIPIENTS,
            ),
        ),
    ),
    Operation.CARD_CHECKOUT: RuleSet(
        name=Operation.CARD_CHECKOUT,
        fields=(
            _product_name(),
            required("paymentCard", FieldKind.ENTITY, schema=PAYMENT_CARD_RULES),
            _currency_code(),
            _amount(),
            required("narration"),
            disallowed("metadata"),
        ),
    ),
    Operation.VALIDATE_CARD_CHECKOUT: _otp_rules(Operation.VALIDATE_CARD_CHECKOUT),
}

RULES: Mapping[Operation, RuleSet] = MappingProxyType(_RULES)


def resolve_operation(operation: Operation | str) -> Operation:
    """Converte nome de operação para Operation.

    Raises:
        UnknownOperationError: Se a operação não existe
    """
    try:
        return Operation(operation)
    except ValueError as exc:
        raise UnknownOperationError(operation) from exc


def get_rules(
    operation: Operation | str,
    registry: Mapping[Operation, RuleSet] = RULES,
) -> RuleSet:
    """Retorna o RuleSet da operação.

    Raises:
        UnknownOperationError: Se a operação não tem regras registradas
    """
    resolved = resolve_operation(operation)
    try:
        return registry[resolved]
    except KeyError as exc:
        raise UnknownOperationError(operation) from exc
