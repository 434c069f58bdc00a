"""App — orquestração, domínio e infraestrutura do serviço.

Subpastas:
- bootstrap/: composition root (logging, settings, factories de stores)
- domain/: entidades (BetaSignup, User)
- protocols/: contratos dos stores
- infra/: implementações concretas (stores em memória)
- observability/: correlation_id e métricas via logs

Padrão: app executa; api adapta; config parametriza.
"""
