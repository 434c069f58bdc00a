"""Validators — validação de payloads recebidos pela API.

Estrutura:
- beta_signup/: pedido de acesso beta (schema pydantic + erros por campo)
"""

__all__: list[str] = []
