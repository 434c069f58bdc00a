"""Fronteira de confiança entre payload não tipado e BetaSignupInput.

`parse_beta_signup` nunca levanta exceção: retorna SignupValidation com
o valor tipado ou com a lista de FieldError. `unwrap()` converte falha
em ValidationError para quem prefere fluxo por exceção.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pydantic

from api.validators.beta_signup.errors import FieldError, ValidationError
from api.validators.beta_signup.schema import BetaSignupInput

REQUIRED_MESSAGES = {
    "name": "Name is required",
    "email": "Email is required",
    "organization": "Organization is required",
}
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
INVALID_PAYLOAD_MESSAGE = "Payload must be an object"

REQUIRED_CODE = "required"

_REQUIRED_ERROR_TYPES = frozenset({"missing", "string_too_short"})


@dataclass(frozen=True, slots=True)
class SignupValidation:
    """Resultado da validação: sucesso (value) ou falha (errors)."""

    value: BetaSignupInput | None = None
    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.errors

    def unwrap(self) -> BetaSignupInput:
        """Retorna o valor validado.

        Raises:
            ValidationError: Se a validação falhou.
        """
        if self.value is None or self.errors:
            raise ValidationError(self.errors)
        return self.value

    @classmethod
    def success(cls, value: BetaSignupInput) -> SignupValidation:
        return cls(value=value)

    @classmethod
    def failure(cls, errors: tuple[FieldError, ...]) -> SignupValidation:
        return cls(errors=errors)


def _to_field_error(error: dict[str, Any]) -> FieldError:
    path = tuple(error.get("loc", ()))
    code = str(error.get("type", "invalid"))
    field_name = path[0] if path else None

    if not path:
        return FieldError(path=(), message=INVALID_PAYLOAD_MESSAGE, code=code)

    if field_name in REQUIRED_MESSAGES and (
        code in _REQUIRED_ERROR_TYPES or error.get("input") is None
    ):
        return FieldError(path=path, message=REQUIRED_MESSAGES[field_name], code=REQUIRED_CODE)

    if field_name == "email":
        return FieldError(path=path, message=INVALID_EMAIL_MESSAGE, code=code)

    return FieldError(path=path, message=str(error.get("msg", "Invalid value")), code=code)


def parse_beta_signup(payload: Any) -> SignupValidation:
    """Valida payload de beta signup.

    Args:
        payload: Corpo já parseado (dict de JSON ou campos de formulário).

    Returns:
        SignupValidation com BetaSignupInput ou com um FieldError por violação.
    """
    try:
        value = BetaSignupInput.model_validate(payload)
    except pydantic.ValidationError as exc:
        errors = tuple(_to_field_error(error) for error in exc.errors())
        return SignupValidation.failure(errors)
    return SignupValidation.success(value)


def validate_beta_signup(payload: Any) -> BetaSignupInput:
    """Variante por exceção de parse_beta_signup.

    Raises:
        ValidationError: Se o payload violar o schema.
    """
    return parse_beta_signup(payload).unwrap()
