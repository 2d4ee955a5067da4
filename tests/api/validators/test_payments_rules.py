"""Testes para o registro de regras de pagamento (api/validators/payments/registry)."""

from __future__ import annotations

import dataclasses

import pytest

from api.validators.payments import RULES, FieldKind, get_rules
from api.validators.payments.limits import MAX_RECIPIENTS, MIN_RECIPIENTS
from api.validators.payments.registry import PAYMENT_CARD_RULES, RECIPIENT_RULES
from api.validators.payments.rules import FieldRule, enum_values
from app.constants.payments import Operation, Provider
from utils.errors import UnknownOperationError


class TestRuleRegistry:
    """Lookup e imutabilidade do registro."""

    def test_every_operation_has_rules(self) -> None:
        assert set(RULES) == set(Operation)
        for operation in Operation:
            assert get_rules(operation).required_fields, operation

    def test_lookup_accepts_operation_name(self) -> None:
        assert get_rules("payConsumer") is get_rules(Operation.PAY_CONSUMER)

    def test_unknown_operation_raises(self) -> None:
        with pytest.raises(UnknownOperationError, match="refund"):
            get_rules("refund")

    def test_registered_operation_missing_from_custom_registry_raises(self) -> None:
        with pytest.raises(UnknownOperationError):
            get_rules(Operation.CHECKOUT, registry={})

    def test_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            RULES[Operation.CHECKOUT] = RULES[Operation.PAY_CONSUMER]  # type: ignore[index]

    def test_rules_are_frozen(self) -> None:
        rule = get_rules(Operation.CHECKOUT).fields[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.required = False  # type: ignore[misc]


class TestRuleContent:
    """Conteúdo declarado por operação."""

    def test_checkout_required_fields(self) -> None:
        required = [rule.name for rule in get_rules("checkout").required_fields]
        assert required == ["productName", "phoneNumber", "currencyCode", "amount"]

    def test_metadata_is_optional_string_map_except_for_card_checkout(self) -> None:
        for operation in ("checkout", "payBusiness", "bankCheckout"):
            metadata = get_rules(operation).get("metadata")
            assert metadata is not None
            assert metadata.kind is FieldKind.STRING_MAP
            assert not metadata.required

        card_metadata = get_rules("cardCheckout").get("metadata")
        assert card_metadata is not None
        assert card_metadata.kind is FieldKind.DISALLOWED

    def test_pay_consumer_recipients_bounds(self) -> None:
        recipients = get_rules("payConsumer").get("recipients")
        assert recipients is not None
        assert recipients.kind is FieldKind.ENTITY_LIST
        assert (recipients.min_count, recipients.max_count) == (MIN_RECIPIENTS, MAX_RECIPIENTS)
        assert recipients.schema is RECIPIENT_RULES

    def test_recipient_required_fields(self) -> None:
        required = [rule.name for rule in RECIPIENT_RULES.required_fields]
        assert required == ["phoneNumber", "currencyCode", "amount"]

    def test_card_checkout_uses_payment_card_schema(self) -> None:
        payment_card = get_rules("cardCheckout").get("paymentCard")
        assert payment_card is not None
        assert payment_card.schema is PAYMENT_CARD_RULES

    def test_otp_operations_require_transaction_id_and_otp(self) -> None:
        for operation in ("validateBankCheckout", "validateCardCheckout"):
            required = [rule.name for rule in get_rules(operation).required_fields]
            assert required == ["transactionId", "otp"]

    def test_enum_values_include_names_and_wire_values(self) -> None:
        assert enum_values(Provider) == frozenset({"MPESA", "ATHENA", "Mpesa", "Athena"})


class TestFieldRule:
    """Construção de FieldRule."""

    @pytest.mark.parametrize("kind", [FieldKind.ENTITY, FieldKind.ENTITY_LIST])
    def test_entity_kinds_require_schema(self, kind: FieldKind) -> None:
        with pytest.raises(ValueError, match="requires a schema"):
            FieldRule(name="bankAccount", kind=kind)

    def test_entity_with_schema_is_built(self) -> None:
        rule = FieldRule(name="recipients", kind=FieldKind.ENTITY_LIST, schema=RECIPIENT_RULES)

        assert rule.schema is RECIPIENT_RULES
