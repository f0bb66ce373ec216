"""User domain entity.

One record shape is shared by every kind of user. Which strategies a user
can authenticate with follows from the credentials present on the record:

    - password: ``password_hash`` is set
    - wallet: ``wallet_address`` (and ``wallet_scheme``) is set
    - federated: ``federated_id`` is set

A user with none of the three is invalid (see ``validate_user``).

Username, email, wallet address and federated id are globally unique when
present. Uniqueness is enforced by the user repository, not by the entity.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from rend_auth.domain.enums import UserKind, UserRole, WalletScheme


@dataclass
class User:
    """User domain entity with credential-linking business rules.

    Attributes:
        id: Unique user identifier (UUIDv7).
        role: Exactly one role (creator or reviewer).
        created_at: Creation timestamp (UTC).
        updated_at: Last mutation timestamp (UTC).
        username: Optional unique username (case-sensitive, >= 3 chars).
        email: Optional unique email (normalized lowercase).
        password_hash: Optional bcrypt hash. Never serialized outward.
        wallet_address: Optional unique wallet address, normalized per scheme.
        wallet_scheme: Required when ``wallet_address`` is set.
        wallet_authenticated: True once a wallet signature was verified.
        federated_id: Optional unique subject id from the federated provider.
        federated_authenticated: True once a federated assertion was verified.
        reset_token_hash: SHA-256 hex digest of a pending reset token.
        reset_token_expires_at: Absolute expiry of the pending reset token.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     role=UserRole.CREATOR,
        ...     created_at=now,
        ...     updated_at=now,
        ...     wallet_address="0xabc...",
        ...     wallet_scheme=WalletScheme.EVM,
        ... )
        >>> user.kind
        <UserKind.WALLET: 'wallet'>
    """

    id: UUID
    role: UserRole
    created_at: datetime
    updated_at: datetime

    username: str | None = None
    email: str | None = None
    password_hash: str | None = None

    wallet_address: str | None = None
    wallet_scheme: WalletScheme | None = None
    wallet_authenticated: bool = False

    federated_id: str | None = None
    federated_authenticated: bool = False

    reset_token_hash: str | None = None
    reset_token_expires_at: datetime | None = None

    @property
    def has_password(self) -> bool:
        return self.password_hash is not None

    @property
    def has_wallet(self) -> bool:
        return self.wallet_address is not None

    @property
    def has_federated_identity(self) -> bool:
        return self.federated_id is not None

    @property
    def kind(self) -> UserKind | None:
        """Derive the user kind from the credentials present.

        Returns:
            UserKind | None: The kind, or None when no credential is set
                (an invalid record).
        """
        present = [
            kind
            for kind, flag in (
                (UserKind.PASSWORD, self.has_password),
                (UserKind.WALLET, self.has_wallet),
                (UserKind.FEDERATED, self.has_federated_identity),
            )
            if flag
        ]
        if not present:
            return None
        if len(present) > 1:
            return UserKind.COMBINED
        return present[0]

    def mark_wallet_authenticated(self) -> None:
        """Record a successful wallet signature verification."""
        self.wallet_authenticated = True
        self._touch()

    def mark_federated_authenticated(self) -> None:
        self.federated_authenticated = True
        self._touch()

    def link_federated_identity(self, federated_id: str) -> None:
        """Link a federated identity to this user (account merge).

        An existing federated id is replaced.

        Side Effects:
            - Sets federated_id
            - Sets federated_authenticated to True
        """
        self.federated_id = federated_id
        self.federated_authenticated = True
        self._touch()

    def set_password_hash(self, password_hash: str) -> None:
        self.password_hash = password_hash
        self._touch()

    def set_reset_token(self, token_hash: str, expires_at: datetime) -> None:
        """Store a pending password reset (hash only, never the raw token)."""
        self.reset_token_hash = token_hash
        self.reset_token_expires_at = expires_at
        self._touch()

    def clear_reset_token(self) -> None:
        self.reset_token_hash = None
        self.reset_token_expires_at = None
        self._touch()

    def is_reset_token_valid(self, now: datetime | None = None) -> bool:
        """Check that a pending reset token exists and has not expired.

        Expiry is exclusive: a token is rejected at its exact expiry instant.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            bool: True if a reset token is pending and ``expires_at > now``.
        """
        if self.reset_token_hash is None or self.reset_token_expires_at is None:
            return False
        return self.reset_token_expires_at > (now or datetime.now(UTC))

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
