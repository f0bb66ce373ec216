"""Authentication domain events.

Pattern: SUCCEEDED/FAILED pair per workflow.
- Success events are published after the user record is persisted.
- Failure events carry a ``reason`` naming the failed check.

Handlers:
- LoggingEventHandler: ALL events
"""

from dataclasses import dataclass
from uuid import UUID

from rend_auth.domain.events.base_event import DomainEvent


# ═══════════════════════════════════════════════════════════════
# Password Registration and Login
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class UserRegistered(DomainEvent):
    """User registration completed successfully.

    Attributes:
        user_id: ID of newly registered user.
        email: User's email address.
        role: Role assigned at registration.
    """

    user_id: UUID
    email: str
    role: str


@dataclass(frozen=True, kw_only=True)
class UserRegistrationFailed(DomainEvent):
    """User registration failed.

    Attributes:
        email: Email address attempted.
        reason: Failure reason (e.g., "duplicate_email", "invalid_password").
    """

    email: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class UserLoginSucceeded(DomainEvent):
    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class UserLoginFailed(DomainEvent):
    """User login failed.

    Attributes:
        email: Email address attempted.
        reason: Failure reason (e.g., "user_not_found", "invalid_password").
        user_id: User ID if found.
    """

    email: str
    reason: str
    user_id: UUID | None = None


# ═══════════════════════════════════════════════════════════════
# Wallet Challenge and Authentication
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class WalletNonceIssued(DomainEvent):
    """Wallet challenge nonce issued.

    Attributes:
        wallet_address: Normalized wallet address.
        wallet_scheme: Wallet scheme value (evm, solana).
        expires_in: Seconds until the nonce expires.
    """

    wallet_address: str
    wallet_scheme: str
    expires_in: int


@dataclass(frozen=True, kw_only=True)
class WalletAuthenticationSucceeded(DomainEvent):
    """Wallet signature verified and user resolved.

    Attributes:
        user_id: Resolved user.
        wallet_address: Normalized wallet address.
        wallet_scheme: Wallet scheme value.
        created: True when the user was created by this authentication.
    """

    user_id: UUID
    wallet_address: str
    wallet_scheme: str
    created: bool


@dataclass(frozen=True, kw_only=True)
class WalletAuthenticationFailed(DomainEvent):
    """Wallet authentication failed.

    Attributes:
        wallet_address: Wallet address attempted (as supplied).
        reason: Failure reason (e.g., "invalid_nonce", "invalid_signature").
    """

    wallet_address: str
    reason: str


# ═══════════════════════════════════════════════════════════════
# Federated Authentication
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class FederatedAuthenticationSucceeded(DomainEvent):
    user_id: UUID
    federated_id: str
    created: bool


@dataclass(frozen=True, kw_only=True)
class FederatedAuthenticationFailed(DomainEvent):
    """Federated authentication failed.

    Attributes:
        reason: Failure reason (e.g., "provider_unconfigured",
            "invalid_assertion", "duplicate_identity").
    """

    reason: str


@dataclass(frozen=True, kw_only=True)
class FederatedIdentityLinked(DomainEvent):
    """Federated identity merged into an existing account found by email.

    Attributes:
        user_id: Existing user that received the federated identity.
        federated_id: Linked federated subject id.
        email: Email that matched.
    """

    user_id: UUID
    federated_id: str
    email: str


# ═══════════════════════════════════════════════════════════════
# Password Reset
# ═══════════════════════════════════════════════════════════════


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequested(DomainEvent):
    """Reset token stored and reset email sent.

    Attributes:
        user_id: User the reset was issued for.
        email: Recipient address.
    """

    user_id: UUID
    email: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestFailed(DomainEvent):
    """Reset request failed.

    Unknown emails are recorded here with reason "user_not_found" even
    though the caller receives the same success payload.
    """

    email: str
    reason: str


@dataclass(frozen=True, kw_only=True)
class PasswordResetCompleted(DomainEvent):
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class PasswordResetFailed(DomainEvent):
    """Reset redemption failed.

    Attributes:
        reason: Failure reason (e.g., "invalid_token", "invalid_password").
        user_id: User ID if the token matched.
    """

    reason: str
    user_id: UUID | None = None
