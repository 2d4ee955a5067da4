"""Validators por domínio — validação de parâmetros antes de chamar APIs externas.

Estrutura:
- payments/: operações do gateway de pagamentos (mobile, bank, card)

Cada domínio tem seus próprios validators, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
