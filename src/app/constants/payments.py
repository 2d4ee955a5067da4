"""Enums de domínio para operações de pagamento.

Os valores são os literais aceitos pelo gateway (wire format).
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


class Operation(StrEnum):
    """Operações de pagamento expostas pelo cliente."""

    CHECKOUT = "checkout"
    PAY_CONSUMER = "payConsumer"
    PAY_BUSINESS = "payBusiness"
    BANK_CHECKOUT = "bankCheckout"
    VALIDATE_BANK_CHECKOUT = "validateBankCheckout"
    BANK_TRANSFER = "bankTransfer"
    CARD_CHECKOUT = "cardCheckout"
    VALIDATE_CARD_CHECKOUT = "validateCardCheckout"


class Reason(StrEnum):
    """Motivos aceitos para pagamentos B2C."""

    SALARY = "SalaryPayment"
    SALARY_WITH_CHARGE = "SalaryPaymentWithWithdrawalChargePaid"
    BUSINESS = "BusinessPayment"
    BUSINESS_WITH_CHARGE = "BusinessPaymentWithWithdrawalChargePaid"
    PROMOTION = "PromotionPayment"


class Provider(StrEnum):
    """Provedores de pagamento B2B."""

    MPESA = "Mpesa"
    ATHENA = "Athena"


class TransferType(StrEnum):
    """Tipos de transferência B2B."""

    BUY_GOODS = "BusinessBuyGoods"
    PAYBILL = "BusinessPayBill"
    DISBURSE_FUNDS = "DisburseFundsToBusiness"
    B2B_TRANSFER = "BusinessToBusinessTransfer"


class BankCode(IntEnum):
    """Códigos de banco para checkout e transferência bancária."""

    FCMB_NG = 234001
    ZENITH_NG = 234002
    ACCESS_NG = 234003
    GTBANK_NG = 234004
    ECOBANK_NG = 234005
    DIAMOND_NG = 234006
    PROVIDUS_NG = 234007
    UNITY_NG = 234008
    STANBIC_NG = 234009
    STERLING_NG = 234010
    PARKWAY_NG = 234011
    AFRIBANK_NG = 234012
    ENTERPRISE_NG = 234013
    FIDELITY_NG = 234014
    HERITAGE_NG = 234015
    KEYSTONE_NG = 234016
    SKYE_NG = 234017
    STANCHART_NG = 234018
    UNION_NG = 234019
    UBA_NG = 234020
    WEMA_NG = 234021
    FIRST_NG = 234022
    CBA_KE = 254001


class ViolationCode(StrEnum):
    """Categorias de violação reportadas pela validação de parâmetros."""

    MISSING_FIELD = "MissingField"
    TYPE_MISMATCH = "TypeMismatch"
    COUNT_OUT_OF_RANGE = "CountOutOfRange"
    INVALID_ENUM_VALUE = "InvalidEnumValue"
    DISALLOWED_FIELD = "DisallowedField"


# Aliases para acesso no estilo REASON.SALARY, BANK.FCMB_NG
REASON = Reason
PROVIDER = Provider
TRANSFER_TYPE = TransferType
BANK = BankCode
