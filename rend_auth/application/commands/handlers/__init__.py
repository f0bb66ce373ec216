"""Command handlers."""

from rend_auth.application.commands.handlers.authenticate_federated_handler import (
    AuthenticateFederatedHandler,
)
from rend_auth.application.commands.handlers.authenticate_wallet_handler import (
    AuthenticateWalletHandler,
)
from rend_auth.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
    PasswordResetConfirmResponse,
)
from rend_auth.application.commands.handlers.issue_nonce_handler import (
    IssueNonceHandler,
)
from rend_auth.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from rend_auth.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from rend_auth.application.commands.handlers.request_password_reset_handler import (
    PasswordResetRequestResponse,
    RequestPasswordResetHandler,
)

__all__ = [
    "AuthenticateFederatedHandler",
    "AuthenticateWalletHandler",
    "ConfirmPasswordResetHandler",
    "IssueNonceHandler",
    "LoginUserHandler",
    "PasswordResetConfirmResponse",
    "PasswordResetRequestResponse",
    "RegisterUserHandler",
    "RequestPasswordResetHandler",
]
