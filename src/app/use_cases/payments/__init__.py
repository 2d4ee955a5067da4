"""Use cases de pagamento."""

from .payments_service import PaymentsService

__all__ = ["PaymentsService"]
