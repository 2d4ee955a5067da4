"""Filters de logging para injeção de contexto.

Campos injetados:
- correlation_id: ID de rastreamento da chamada
- service: Nome do serviço
- operation: Operação de pagamento (vazio fora de uma operação)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id, service e operation em cada record de log.

    Valores passados explicitamente via `extra` são preservados.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        if not hasattr(record, "operation"):
            record.operation = ""
        return True
