"""Protocolos de construção de payload de pagamento."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.constants.payments import Operation


class PayloadBuilderProtocol(Protocol):
    """Contrato mínimo para construir o corpo da requisição."""

    def build_request_body(
        self,
        operation: Operation,
        params: Mapping[str, Any],
        username: str,
    ) -> dict[str, Any]: ...
