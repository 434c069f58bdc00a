"""API — camada de borda HTTP.

Responsabilidades:
- Receber requests da landing page (JSON e formulário)
- Validar payloads na fronteira (validators/)
- Traduzir resultados e erros em respostas HTTP (routes/)

NÃO PODE conter: regras de persistência ou estado de processo.
"""
