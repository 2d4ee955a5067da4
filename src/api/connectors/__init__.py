"""Connectors — adapters de borda para APIs externas.

Estrutura:
- payments/: gateway de pagamentos (mobile, bank, card)
"""

__all__: list[str] = []
