"""Payload builders por domínio — construção de payloads para APIs externas.

Estrutura:
- payments/: corpo e endpoint de cada operação de pagamento

Cada domínio tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
