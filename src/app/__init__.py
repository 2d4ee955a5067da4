"""App — orquestração das operações de pagamento.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- constants/: enums de domínio (operações, motivos, provedores, bancos)
- use_cases/: casos de uso (validação → payload → gateway)
- observability/: correlation_id para logs
- protocols/: contratos/interfaces e modelos de validação
"""
