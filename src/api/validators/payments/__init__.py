"""Validadores de parâmetros das operações de pagamento.

Uso:
    from api.validators.payments import PaymentRequestValidator

    validator = PaymentRequestValidator()
    result = validator.validate("checkout", params)
    if result.rejected:
        ...
"""

from api.validators.payments.limits import MAX_RECIPIENTS, MIN_RECIPIENTS
from api.validators.payments.registry import RULES, get_rules
from api.validators.payments.rules import FieldKind, FieldRule, RuleSet
from api.validators.payments.validator_dispatcher import PaymentRequestValidator

__all__ = [
    "MAX_RECIPIENTS",
    "MIN_RECIPIENTS",
    "RULES",
    "FieldKind",
    "FieldRule",
    "PaymentRequestValidator",
    "RuleSet",
    "get_rules",
]
