"""Commands (CQRS write operations)."""

from rend_auth.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    RegisterUser,
    RequestPasswordReset,
)
from rend_auth.application.commands.federated_commands import (
    AuthenticateFederated,
    AuthenticateFederatedCode,
)
from rend_auth.application.commands.wallet_commands import (
    AuthenticateWallet,
    IssueNonce,
)

__all__ = [
    "AuthenticateFederated",
    "AuthenticateFederatedCode",
    "AuthenticateWallet",
    "ConfirmPasswordReset",
    "IssueNonce",
    "LoginUser",
    "RegisterUser",
    "RequestPasswordReset",
]
