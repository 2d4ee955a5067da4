"""Formatters de logging estruturado.

Logs JSON com campos obrigatórios:
- correlation_id
- service
- operation
- timestamp (asctime)
- level
- logger (name)
- message

Nunca incluir valores de parâmetros de pagamento (telefones, contas, cartões).
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
    "operation",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-18 10:30:00,123",
            "level": "WARNING",
            "logger": "api.validators.payments.validator_dispatcher",
            "message": "payment_params_rejected",
            "correlation_id": "abc-123",
            "service": "payments_client",
            "operation": "checkout"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
