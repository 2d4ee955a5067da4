"""Limites e formatos aceitos nos parâmetros de pagamento."""

from __future__ import annotations

import re

# Recipients por requisição B2C
MIN_RECIPIENTS = 1
MAX_RECIPIENTS = 10

# Transferência bancária exige ao menos um destinatário (sem teto no cliente)
MIN_BANK_RECIPIENTS = 1

PHONE_NUMBER_PATTERN = re.compile(r"^\+?[0-9]{9,15}$")
CURRENCY_CODE_PATTERN = re.compile(r"^[A-Za-z]{3}$")
COUNTRY_CODE_PATTERN = re.compile(r"^[A-Za-z]{2}$")
DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
CARD_NUMBER_PATTERN = re.compile(r"^[0-9]{12,19}$")

MIN_EXPIRY_MONTH = 1
MAX_EXPIRY_MONTH = 12
