"""Domain events package.

Usage:
    from rend_auth.domain.events import DomainEvent, UserRegistered
"""

from rend_auth.domain.events.auth_events import (
    FederatedAuthenticationFailed,
    FederatedAuthenticationSucceeded,
    FederatedIdentityLinked,
    PasswordResetCompleted,
    PasswordResetFailed,
    PasswordResetRequested,
    PasswordResetRequestFailed,
    UserLoginFailed,
    UserLoginSucceeded,
    UserRegistered,
    UserRegistrationFailed,
    WalletAuthenticationFailed,
    WalletAuthenticationSucceeded,
    WalletNonceIssued,
)
from rend_auth.domain.events.base_event import DomainEvent

ALL_AUTH_EVENTS: tuple[type[DomainEvent], ...] = (
    UserRegistered,
    UserRegistrationFailed,
    UserLoginSucceeded,
    UserLoginFailed,
    WalletNonceIssued,
    WalletAuthenticationSucceeded,
    WalletAuthenticationFailed,
    FederatedAuthenticationSucceeded,
    FederatedAuthenticationFailed,
    FederatedIdentityLinked,
    PasswordResetRequested,
    PasswordResetRequestFailed,
    PasswordResetCompleted,
    PasswordResetFailed,
)

__all__ = [
    "ALL_AUTH_EVENTS",
    "DomainEvent",
    "FederatedAuthenticationFailed",
    "FederatedAuthenticationSucceeded",
    "FederatedIdentityLinked",
    "PasswordResetCompleted",
    "PasswordResetFailed",
    "PasswordResetRequestFailed",
    "PasswordResetRequested",
    "UserLoginFailed",
    "UserLoginSucceeded",
    "UserRegistered",
    "UserRegistrationFailed",
    "WalletAuthenticationFailed",
    "WalletAuthenticationSucceeded",
    "WalletNonceIssued",
]
