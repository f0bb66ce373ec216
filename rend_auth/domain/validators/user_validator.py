"""Invariant check run on a user before every insert or update."""

from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import ValidationError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.entities import User
from rend_auth.domain.validators.functions import validate_email, validate_username


def validate_user(user: User) -> Result[User, ValidationError]:
    """Check the user record invariants.

    Rules:
        - At least one of password, wallet or federated credential is set.
        - A wallet address requires a wallet scheme.
        - Authenticated flags require the matching credential.
        - Username (when set) is at least 3 characters.
        - Email (when set) is well-formed and already normalized.
        - Reset token hash and expiry are set together or not at all.

    Returns:
        Success(user) when all rules hold, otherwise Failure(ValidationError)
        for the first broken rule.
    """
    if user.kind is None:
        return _invalid(
            ErrorCode.MISSING_CREDENTIAL,
            "User must have a password, wallet or federated credential",
        )

    if user.wallet_address is not None and user.wallet_scheme is None:
        return _invalid(
            ErrorCode.INVALID_WALLET_SCHEME,
            "Wallet type is required when a wallet address is set",
            field="wallet_scheme",
        )

    if user.wallet_authenticated and not user.has_wallet:
        return _invalid(
            ErrorCode.VALIDATION_FAILED,
            "Wallet authentication requires a wallet address",
            field="wallet_address",
        )

    if user.federated_authenticated and not user.has_federated_identity:
        return _invalid(
            ErrorCode.VALIDATION_FAILED,
            "Federated authentication requires a federated id",
            field="federated_id",
        )

    if user.username is not None:
        try:
            validate_username(user.username)
        except ValueError as e:
            return _invalid(ErrorCode.INVALID_USERNAME, str(e), field="username")

    if user.email is not None:
        try:
            normalized = validate_email(user.email)
        except ValueError as e:
            return _invalid(ErrorCode.INVALID_EMAIL, str(e), field="email")
        if normalized != user.email:
            return _invalid(
                ErrorCode.INVALID_EMAIL,
                "Email must be normalized",
                field="email",
            )

    if (user.reset_token_hash is None) != (user.reset_token_expires_at is None):
        return _invalid(
            ErrorCode.VALIDATION_FAILED,
            "Reset token hash and expiry must be set together",
            field="reset_token_hash",
        )

    return Success(value=user)


def _invalid(
    code: ErrorCode, message: str, field: str | None = None
) -> Failure[ValidationError]:
    return Failure(error=ValidationError(code=code, message=message, field=field))
