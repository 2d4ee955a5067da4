"""API — camada de borda com o gateway de pagamentos.

Responsabilidades:
- Validar parâmetros de cada operação antes do envio
- Construir o corpo das requisições para o gateway
- Executar chamadas HTTP e classificar erros do gateway

Subpastas:
- connectors/: cliente HTTP do gateway
- payload_builders/: construção do corpo de cada operação
- validators/: regras declarativas e validação de parâmetros

NÃO PODE conter: orquestração de use cases, wiring de dependências.
"""
