"""Authentication DTOs (Data Transfer Objects).

Result dataclasses carried from handlers back to the caller.

DTOs:
    - UserView: outward user representation (no secrets)
    - AuthSession: session token plus the authenticated user
    - NonceChallenge: wallet challenge to be signed
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from rend_auth.domain.entities import User


@dataclass(frozen=True, kw_only=True)
class UserView:
    """Outward representation of a user.

    Never carries the password hash or reset token fields.
    """

    id: UUID
    role: str
    kind: str | None
    username: str | None
    email: str | None
    wallet_address: str | None
    wallet_scheme: str | None
    wallet_authenticated: bool
    federated_id: str | None
    federated_authenticated: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=user.id,
            role=user.role.value,
            kind=user.kind.value if user.kind else None,
            username=user.username,
            email=user.email,
            wallet_address=user.wallet_address,
            wallet_scheme=user.wallet_scheme.value if user.wallet_scheme else None,
            wallet_authenticated=user.wallet_authenticated,
            federated_id=user.federated_id,
            federated_authenticated=user.federated_authenticated,
            created_at=user.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthSession:
    """Response from any successful authentication.

    Attributes:
        token: Bearer session token.
        user: The authenticated user.
    """

    token: str
    user: UserView


@dataclass(frozen=True, kw_only=True)
class NonceChallenge:
    """Wallet challenge.

    Attributes:
        nonce: Hex nonce embedded in the message.
        message: Exact text the wallet must sign.
    """

    nonce: str
    message: str
