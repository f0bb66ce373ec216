"""Unit tests for NonceService.

Tests cover:
- Challenge issuance (message format, normalization, validation)
- Single-use redemption
- Nonce extraction from signed messages
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from rend_auth.application.services import NonceService, build_challenge_message
from rend_auth.core.enums import ErrorCode
from rend_auth.core.result import Failure, Success
from rend_auth.infrastructure.persistence import InMemoryNonceRepository

EVM_ADDRESS = "0xAbCdEf0123456789aBcDeF0123456789AbCdEf01"


@pytest.fixture
def nonce_repo():
    return InMemoryNonceRepository()


@pytest.fixture
def service(nonce_repo):
    return NonceService(nonce_repo, service_name="Rend", ttl_seconds=300)


@pytest.mark.unit
class TestIssueNonce:
    async def test_issue_returns_challenge(self, service):
        result = await service.issue_nonce(EVM_ADDRESS, "evm")

        assert isinstance(result, Success)
        challenge = result.value
        assert len(challenge.nonce) == 64
        assert challenge.message == (
            f"Sign this message to authenticate with Rend.\n\nNonce: {challenge.nonce}"
        )

    async def test_issued_nonces_are_distinct(self, service):
        first = await service.issue_nonce(EVM_ADDRESS, "evm")
        second = await service.issue_nonce(EVM_ADDRESS, "evm")

        assert first.value.nonce != second.value.nonce

    async def test_evm_nonce_stored_under_lowercase_address(self, service):
        challenge = (await service.issue_nonce(EVM_ADDRESS, "evm")).value

        result = await service.redeem_nonce(EVM_ADDRESS.lower(), challenge.nonce)

        assert isinstance(result, Success)

    async def test_unknown_scheme_rejected(self, service, nonce_repo):
        result = await service.issue_nonce(EVM_ADDRESS, "bitcoin")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_WALLET_SCHEME
        assert len(nonce_repo) == 0

    async def test_empty_address_rejected(self, service):
        result = await service.issue_nonce("   ", "solana")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_WALLET_ADDRESS
        assert result.error.field == "wallet_address"


@pytest.mark.unit
class TestRedeemNonce:
    async def test_redeem_once(self, service):
        challenge = (await service.issue_nonce(EVM_ADDRESS, "evm")).value
        address = EVM_ADDRESS.lower()

        first = await service.redeem_nonce(address, challenge.nonce)
        second = await service.redeem_nonce(address, challenge.nonce)

        assert isinstance(first, Success)
        assert first.value.used is True
        assert isinstance(second, Failure)
        assert second.error.code == ErrorCode.INVALID_OR_EXPIRED_NONCE

    async def test_unknown_nonce(self, service):
        result = await service.redeem_nonce(EVM_ADDRESS.lower(), "ab" * 32)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_OR_EXPIRED_NONCE

    async def test_expired_nonce(self, service):
        issued_at = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
        with freeze_time(issued_at):
            challenge = (await service.issue_nonce(EVM_ADDRESS, "evm")).value

        with freeze_time(issued_at + timedelta(seconds=301)):
            result = await service.redeem_nonce(EVM_ADDRESS.lower(), challenge.nonce)

        assert isinstance(result, Failure)

    async def test_earlier_nonce_still_valid_after_new_issue(self, service):
        first = (await service.issue_nonce(EVM_ADDRESS, "evm")).value
        await service.issue_nonce(EVM_ADDRESS, "evm")

        result = await service.redeem_nonce(EVM_ADDRESS.lower(), first.nonce)

        assert isinstance(result, Success)


@pytest.mark.unit
class TestExtractNonce:
    def test_extracts_from_challenge(self):
        message = build_challenge_message("Rend", "deadbeef")

        result = NonceService.extract_nonce(message)

        assert result == Success(value="deadbeef")

    def test_extracts_from_surrounding_text(self):
        result = NonceService.extract_nonce("prefix\nNonce: 0a1b2c\nsuffix")

        assert result == Success(value="0a1b2c")

    @pytest.mark.parametrize("message", ["", "hello", "Nonce: XYZ", "nonce: abc"])
    def test_missing_nonce_line(self, message):
        result = NonceService.extract_nonce(message)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_FORMAT
        assert result.error.field == "message"
