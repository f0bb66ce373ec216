"""Identity resolver: find-or-create users for wallet and federated logins.

Links identities onto a single user record:

Wallet path:
    1. Find by normalized wallet address
    2. Otherwise create a wallet user
    3. Mark wallet_authenticated

Federated path:
    1. Find by federated id, mark federated_authenticated
    2. Otherwise find by email and link the federated identity to it
    3. Otherwise create a user with a derived username

Concurrent first logins race on insert. The loser's insert is rejected by
the repository's unique index (DuplicateKeyError) and is retried as a
lookup, so two racing logins resolve to the same user.

Every record is checked with ``validate_user`` before it is written.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from uuid_extensions import uuid7

from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import ConflictError, DomainError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.entities import User
from rend_auth.domain.enums import UserRole, WalletScheme
from rend_auth.domain.errors import AuthErrorMessage, DuplicateKeyError
from rend_auth.domain.protocols import FederatedClaims, UserRepository
from rend_auth.domain.validators import derive_federated_username, validate_user


@dataclass(frozen=True, kw_only=True)
class ResolvedIdentity:
    """Outcome of identity resolution.

    Attributes:
        user: The resolved (persisted) user.
        created: True when the user was created by this resolution.
        linked: True when a federated identity was linked to an existing
            user found by email.
    """

    user: User
    created: bool = False
    linked: bool = False


class IdentityResolver:
    """Find-or-create logic shared by the wallet and federated handlers."""

    def __init__(self, user_repo: UserRepository) -> None:
        """Initialize identity resolver.

        Args:
            user_repo: User repository with unique indexes on username,
                email, wallet address and federated id.
        """
        self._user_repo = user_repo

    async def resolve_wallet_user(
        self, wallet_address: str, wallet_scheme: WalletScheme
    ) -> Result[ResolvedIdentity, DomainError]:
        """Resolve the user owning a verified wallet.

        Args:
            wallet_address: Normalized wallet address.
            wallet_scheme: Scheme the signature was verified with.

        Returns:
            Success(ResolvedIdentity) with ``wallet_authenticated`` set, or
            Failure(DomainError) when the record fails validation or a
            unique field collides.
        """
        user = await self._user_repo.find_by_wallet_address(wallet_address)

        if user is None:
            now = datetime.now(UTC)
            new_user = User(
                id=uuid7(),
                role=UserRole.CREATOR,
                created_at=now,
                updated_at=now,
                wallet_address=wallet_address,
                wallet_scheme=wallet_scheme,
                wallet_authenticated=True,
            )
            match validate_user(new_user):
                case Failure(error=error):
                    return Failure(error=error)

            try:
                await self._user_repo.insert(new_user)
                return Success(value=ResolvedIdentity(user=new_user, created=True))
            except DuplicateKeyError as e:
                # Lost a first-login race; the winner's record is the user
                user = await self._user_repo.find_by_wallet_address(wallet_address)
                if user is None:
                    return Failure(error=_duplicate_identity(e.field))

        user.mark_wallet_authenticated()
        return await self._save_existing(user)

    async def resolve_federated_user(
        self, claims: FederatedClaims
    ) -> Result[ResolvedIdentity, DomainError]:
        """Resolve the user for verified federated claims.

        Username collisions of a newly created user are not de-duplicated;
        they surface as ``DUPLICATE_IDENTITY`` unless a lookup by federated
        id or email finds the record that won the insert.

        Args:
            claims: Claims from a verified assertion.

        Returns:
            Success(ResolvedIdentity) with ``federated_authenticated`` set,
            or Failure(DomainError).
        """
        resolved = await self._find_federated_user(claims)
        if resolved is not None:
            return resolved

        now = datetime.now(UTC)
        new_user = User(
            id=uuid7(),
            role=UserRole.CREATOR,
            created_at=now,
            updated_at=now,
            username=derive_federated_username(claims.display_name, claims.subject_id),
            email=claims.email,
            federated_id=claims.subject_id,
            federated_authenticated=True,
        )
        match validate_user(new_user):
            case Failure(error=error):
                return Failure(error=error)

        try:
            await self._user_repo.insert(new_user)
        except DuplicateKeyError as e:
            # Any unique field can reject the loser of a first-login race
            resolved = await self._find_federated_user(claims)
            if resolved is None:
                return Failure(error=_duplicate_identity(e.field))
            return resolved

        return Success(value=ResolvedIdentity(user=new_user, created=True))

    async def _find_federated_user(
        self, claims: FederatedClaims
    ) -> Result[ResolvedIdentity, DomainError] | None:
        user = await self._user_repo.find_by_federated_id(claims.subject_id)
        if user is not None:
            user.mark_federated_authenticated()
            return await self._save_existing(user)

        if not claims.email:
            return None
        user = await self._user_repo.find_by_email(claims.email)
        if user is None:
            return None

        user.link_federated_identity(claims.subject_id)
        result = await self._save_existing(user)
        match result:
            case Success(value=resolved):
                return Success(value=ResolvedIdentity(user=resolved.user, linked=True))
        return result

    async def _save_existing(
        self, user: User
    ) -> Result[ResolvedIdentity, DomainError]:
        match validate_user(user):
            case Failure(error=error):
                return Failure(error=error)

        try:
            await self._user_repo.update(user)
        except DuplicateKeyError as e:
            return Failure(error=_duplicate_identity(e.field))
        return Success(value=ResolvedIdentity(user=user))


def _duplicate_identity(field: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.DUPLICATE_IDENTITY,
        message=AuthErrorMessage.IDENTITY_IN_USE,
        conflicting_field=field,
    )
