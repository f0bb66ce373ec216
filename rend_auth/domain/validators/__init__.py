"""Domain validators.

Usage:
    from rend_auth.domain.validators import validate_email, validate_user
"""

from rend_auth.domain.validators.functions import (
    derive_federated_username,
    normalize_wallet_address,
    parse_wallet_scheme,
    validate_email,
    validate_password,
    validate_username,
)
from rend_auth.domain.validators.user_validator import validate_user

__all__ = [
    "derive_federated_username",
    "normalize_wallet_address",
    "parse_wallet_scheme",
    "validate_email",
    "validate_password",
    "validate_user",
    "validate_username",
]
