"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from rend_auth.core.container import get_login_user_handler

The container is organized into modules:
- infrastructure: Core services (logging, hashing, tokens, verifiers, email)
- events: Event bus and subscriptions
- repositories: User and nonce stores
- auth_handlers: Application services and handler factories
"""

# Infrastructure services
from rend_auth.core.container.infrastructure import (
    get_email_service,
    get_identity_provider,
    get_logger,
    get_password_service,
    get_redis,
    get_reset_token_service,
    get_session_service,
    get_signature_verifier_registry,
)

# Event bus
from rend_auth.core.container.events import get_event_bus

# Repositories
from rend_auth.core.container.repositories import (
    get_nonce_repository,
    get_user_repository,
)

# Auth handlers
from rend_auth.core.container.auth_handlers import (
    get_authenticate_federated_handler,
    get_authenticate_wallet_handler,
    get_confirm_password_reset_handler,
    get_current_user_handler,
    get_identity_resolver,
    get_issue_nonce_handler,
    get_login_user_handler,
    get_nonce_service,
    get_register_user_handler,
    get_request_password_reset_handler,
)

__all__ = [
    "get_authenticate_federated_handler",
    "get_authenticate_wallet_handler",
    "get_confirm_password_reset_handler",
    "get_current_user_handler",
    "get_email_service",
    "get_event_bus",
    "get_identity_provider",
    "get_identity_resolver",
    "get_issue_nonce_handler",
    "get_logger",
    "get_login_user_handler",
    "get_nonce_repository",
    "get_nonce_service",
    "get_password_service",
    "get_redis",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_reset_token_service",
    "get_session_service",
    "get_signature_verifier_registry",
    "get_user_repository",
]
