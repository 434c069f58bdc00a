"""Validação do pedido de beta signup.

Uso:
    from api.validators.beta_signup import parse_beta_signup

    result = parse_beta_signup(payload)
    if not result.ok:
        return [error.as_dict() for error in result.errors]
    signup = store.create_signup(result.value)
"""

from api.validators.beta_signup.errors import FieldError, ValidationError
from api.validators.beta_signup.schema import BetaSignupInput
from api.validators.beta_signup.validator import (
    INVALID_EMAIL_MESSAGE,
    REQUIRED_CODE,
    REQUIRED_MESSAGES,
    SignupValidation,
    parse_beta_signup,
    validate_beta_signup,
)

__all__ = [
    "INVALID_EMAIL_MESSAGE",
    "REQUIRED_CODE",
    "REQUIRED_MESSAGES",
    "BetaSignupInput",
    "FieldError",
    "SignupValidation",
    "ValidationError",
    "parse_beta_signup",
    "validate_beta_signup",
]
