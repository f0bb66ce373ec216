"""Authentication handler dependency factories.

Handlers are cheap to build and built per call; everything they depend on
is an application-scoped singleton from the other container modules.
"""

from typing import TYPE_CHECKING

from rend_auth.core.config import get_settings
from rend_auth.core.container.events import get_event_bus
from rend_auth.core.container.infrastructure import (
    get_email_service,
    get_identity_provider,
    get_logger,
    get_password_service,
    get_reset_token_service,
    get_session_service,
    get_signature_verifier_registry,
)
from rend_auth.core.container.repositories import (
    get_nonce_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from rend_auth.application.commands.handlers import (
        AuthenticateFederatedHandler,
        AuthenticateWalletHandler,
        ConfirmPasswordResetHandler,
        IssueNonceHandler,
        LoginUserHandler,
        RegisterUserHandler,
        RequestPasswordResetHandler,
    )
    from rend_auth.application.queries.handlers import GetCurrentUserHandler
    from rend_auth.application.services import IdentityResolver, NonceService


# ============================================================================
# Application Services
# ============================================================================


def get_nonce_service() -> "NonceService":
    from rend_auth.application.services import NonceService

    settings = get_settings()
    return NonceService(
        get_nonce_repository(),
        service_name=settings.service_name,
        ttl_seconds=settings.nonce_ttl_seconds,
    )


def get_identity_resolver() -> "IdentityResolver":
    from rend_auth.application.services import IdentityResolver

    return IdentityResolver(get_user_repository())


# ============================================================================
# Authentication Handler Factories
# ============================================================================


def get_register_user_handler() -> "RegisterUserHandler":
    from rend_auth.application.commands.handlers import RegisterUserHandler

    return RegisterUserHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        session_service=get_session_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_login_user_handler() -> "LoginUserHandler":
    from rend_auth.application.commands.handlers import LoginUserHandler

    return LoginUserHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        session_service=get_session_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_issue_nonce_handler() -> "IssueNonceHandler":
    from rend_auth.application.commands.handlers import IssueNonceHandler

    return IssueNonceHandler(
        nonce_service=get_nonce_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_authenticate_wallet_handler() -> "AuthenticateWalletHandler":
    from rend_auth.application.commands.handlers import AuthenticateWalletHandler

    return AuthenticateWalletHandler(
        nonce_service=get_nonce_service(),
        verifier_registry=get_signature_verifier_registry(),
        identity_resolver=get_identity_resolver(),
        session_service=get_session_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_authenticate_federated_handler() -> "AuthenticateFederatedHandler":
    from rend_auth.application.commands.handlers import AuthenticateFederatedHandler

    return AuthenticateFederatedHandler(
        identity_provider=get_identity_provider(),
        identity_resolver=get_identity_resolver(),
        session_service=get_session_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_request_password_reset_handler() -> "RequestPasswordResetHandler":
    from rend_auth.application.commands.handlers import RequestPasswordResetHandler

    return RequestPasswordResetHandler(
        user_repo=get_user_repository(),
        token_service=get_reset_token_service(),
        notification_service=get_email_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
        reset_url_base=get_settings().reset_url_base,
    )


def get_confirm_password_reset_handler() -> "ConfirmPasswordResetHandler":
    from rend_auth.application.commands.handlers import ConfirmPasswordResetHandler

    return ConfirmPasswordResetHandler(
        user_repo=get_user_repository(),
        password_service=get_password_service(),
        token_service=get_reset_token_service(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


def get_current_user_handler() -> "GetCurrentUserHandler":
    from rend_auth.application.queries.handlers import GetCurrentUserHandler

    return GetCurrentUserHandler(
        user_repo=get_user_repository(),
        session_service=get_session_service(),
    )
