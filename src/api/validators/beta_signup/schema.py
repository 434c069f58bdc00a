"""Schema do payload de beta signup."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class BetaSignupInput(BaseModel):
    """Payload validado de pedido de acesso beta.

    Campos desconhecidos são ignorados (ex: `form-name` da captura de formulário).
    Strings não são normalizadas: `message` vazia chega ao store como "".
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    email: EmailStr
    organization: str = Field(min_length=1)
    message: str | None = None
