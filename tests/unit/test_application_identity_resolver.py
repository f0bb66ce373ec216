"""Unit tests for IdentityResolver.

Tests cover:
- Wallet find-or-create and wallet_authenticated marking
- Federated lookup order: federated id, then email (link), then create
- First-login races resolved through DuplicateKeyError retry
- Username collisions for federated users surface as DUPLICATE_IDENTITY
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from rend_auth.application.services import IdentityResolver
from rend_auth.core.enums import ErrorCode
from rend_auth.core.result import Failure, Success
from rend_auth.domain.entities import User
from rend_auth.domain.enums import UserKind, UserRole, WalletScheme
from rend_auth.domain.errors import DuplicateKeyError
from rend_auth.domain.protocols import FederatedClaims
from rend_auth.infrastructure.persistence import InMemoryUserRepository

WALLET = "0xabcdef0123456789abcdef0123456789abcdef01"


def make_user(**overrides) -> User:
    now = datetime.now(UTC)
    values = {
        "id": uuid7(),
        "role": UserRole.CREATOR,
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return User(**values)


@pytest.fixture
def user_repo():
    return InMemoryUserRepository()


@pytest.fixture
def resolver(user_repo):
    return IdentityResolver(user_repo)


@pytest.mark.unit
class TestResolveWalletUser:
    async def test_creates_wallet_user(self, resolver, user_repo):
        result = await resolver.resolve_wallet_user(WALLET, WalletScheme.EVM)

        assert isinstance(result, Success)
        resolved = result.value
        assert resolved.created is True
        assert resolved.user.role == UserRole.CREATOR
        assert resolved.user.kind == UserKind.WALLET
        assert resolved.user.wallet_authenticated is True
        stored = await user_repo.find_by_wallet_address(WALLET)
        assert stored.id == resolved.user.id

    async def test_second_login_returns_same_user(self, resolver):
        first = await resolver.resolve_wallet_user(WALLET, WalletScheme.EVM)
        second = await resolver.resolve_wallet_user(WALLET, WalletScheme.EVM)

        assert second.value.created is False
        assert second.value.user.id == first.value.user.id

    async def test_existing_user_marked_authenticated(self, resolver, user_repo):
        user = make_user(wallet_address=WALLET, wallet_scheme=WalletScheme.EVM)
        await user_repo.insert(user)

        result = await resolver.resolve_wallet_user(WALLET, WalletScheme.EVM)

        assert result.value.user.id == user.id
        assert (await user_repo.find_by_id(user.id)).wallet_authenticated is True

    async def test_lost_insert_race_resolves_to_winner(self):
        winner = make_user(wallet_address=WALLET, wallet_scheme=WalletScheme.EVM)
        user_repo = AsyncMock()
        user_repo.find_by_wallet_address.side_effect = [None, winner]
        user_repo.insert.side_effect = DuplicateKeyError("wallet_address")

        result = await IdentityResolver(user_repo).resolve_wallet_user(
            WALLET, WalletScheme.EVM
        )

        assert isinstance(result, Success)
        assert result.value.user.id == winner.id
        assert result.value.created is False
        user_repo.update.assert_awaited_once()

    async def test_collision_without_winner_is_conflict(self):
        user_repo = AsyncMock()
        user_repo.find_by_wallet_address.return_value = None
        user_repo.insert.side_effect = DuplicateKeyError("wallet_address")

        result = await IdentityResolver(user_repo).resolve_wallet_user(
            WALLET, WalletScheme.EVM
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.DUPLICATE_IDENTITY


@pytest.mark.unit
class TestResolveFederatedUser:
    def claims(self, **overrides) -> FederatedClaims:
        values = {
            "subject_id": "109876543210123456",
            "email": "ada@example.com",
            "display_name": "Ada Lovelace",
            "email_verified": True,
        }
        values.update(overrides)
        return FederatedClaims(**values)

    async def test_creates_user_with_derived_username(self, resolver):
        result = await resolver.resolve_federated_user(self.claims())

        assert isinstance(result, Success)
        user = result.value.user
        assert result.value.created is True
        assert user.username == "adalovelace"
        assert user.email == "ada@example.com"
        assert user.federated_id == "109876543210123456"
        assert user.federated_authenticated is True
        assert user.kind == UserKind.FEDERATED

    async def test_fallback_username_without_display_name(self, resolver):
        result = await resolver.resolve_federated_user(
            self.claims(display_name=None, email=None)
        )

        assert result.value.user.username == "user_10123456"
        assert result.value.user.email is None

    async def test_existing_federated_user_found(self, resolver, user_repo):
        user = make_user(federated_id="109876543210123456", email="other@example.com")
        await user_repo.insert(user)

        result = await resolver.resolve_federated_user(self.claims())

        assert result.value.user.id == user.id
        assert result.value.created is False
        assert result.value.linked is False
        assert (await user_repo.find_by_id(user.id)).federated_authenticated is True

    async def test_links_to_password_user_by_email(self, resolver, user_repo):
        user = make_user(email="ada@example.com", username="ada", password_hash="h")
        await user_repo.insert(user)

        result = await resolver.resolve_federated_user(self.claims())

        assert result.value.linked is True
        assert result.value.user.id == user.id
        stored = await user_repo.find_by_id(user.id)
        assert stored.federated_id == "109876543210123456"
        assert stored.kind == UserKind.COMBINED
        assert stored.username == "ada"

    async def test_link_does_not_require_verified_email(self, resolver, user_repo):
        user = make_user(email="ada@example.com", password_hash="h")
        await user_repo.insert(user)

        result = await resolver.resolve_federated_user(
            self.claims(email_verified=False)
        )

        assert result.value.linked is True

    async def test_username_collision_is_conflict(self, resolver, user_repo):
        await user_repo.insert(make_user(username="adalovelace", password_hash="h"))

        result = await resolver.resolve_federated_user(
            self.claims(email="new@example.com")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.DUPLICATE_IDENTITY
        assert result.error.conflicting_field == "username"

    async def test_lost_federated_id_race_resolves_to_winner(self):
        winner = make_user(federated_id="109876543210123456")
        user_repo = AsyncMock()
        user_repo.find_by_federated_id.side_effect = [None, winner]
        user_repo.find_by_email.return_value = None
        user_repo.insert.side_effect = DuplicateKeyError("federated_id")

        result = await IdentityResolver(user_repo).resolve_federated_user(self.claims())

        assert isinstance(result, Success)
        assert result.value.user.id == winner.id
        assert winner.federated_authenticated is True

    async def test_lost_race_on_username_resolves_to_winner(self):
        winner = make_user(federated_id="109876543210123456", username="adalovelace")
        user_repo = AsyncMock()
        user_repo.find_by_federated_id.side_effect = [None, winner]
        user_repo.find_by_email.return_value = None
        user_repo.insert.side_effect = DuplicateKeyError("username")

        result = await IdentityResolver(user_repo).resolve_federated_user(self.claims())

        assert isinstance(result, Success)
        assert result.value.user.id == winner.id
        assert result.value.created is False
        user_repo.update.assert_awaited_once()

    async def test_lost_race_on_email_links_committed_user(self):
        registered = make_user(email="ada@example.com", username="ada", password_hash="h")
        user_repo = AsyncMock()
        user_repo.find_by_federated_id.return_value = None
        user_repo.find_by_email.side_effect = [None, registered]
        user_repo.insert.side_effect = DuplicateKeyError("email")

        result = await IdentityResolver(user_repo).resolve_federated_user(self.claims())

        assert isinstance(result, Success)
        assert result.value.linked is True
        assert result.value.user.id == registered.id
        assert registered.federated_id == "109876543210123456"

    async def test_lost_race_without_winner_is_conflict(self):
        user_repo = AsyncMock()
        user_repo.find_by_federated_id.return_value = None
        user_repo.find_by_email.return_value = None
        user_repo.insert.side_effect = DuplicateKeyError("username")

        result = await IdentityResolver(user_repo).resolve_federated_user(self.claims())

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.DUPLICATE_IDENTITY
        assert result.error.conflicting_field == "username"
