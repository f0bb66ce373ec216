"""Nonce challenge service for wallet authentication.

Issues single-use challenges, redeems them exactly once, and parses the
nonce back out of a signed challenge message.

Challenge message format (the wallet signs this text verbatim):

    Sign this message to authenticate with <service name>.

    Nonce: <64 hex characters>

Usage:
    service = NonceService(nonce_repo, service_name="Rend", ttl_seconds=300)
    result = await service.issue_nonce("0xAbC...", "evm")
"""

import re
import secrets

from rend_auth.application.dtos import NonceChallenge
from rend_auth.core.constants import NONCE_BYTES
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import AuthenticationError, ValidationError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.entities import Nonce
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.protocols import NonceRepository
from rend_auth.domain.validators import normalize_wallet_address, parse_wallet_scheme

NONCE_PATTERN = re.compile(r"Nonce: ([a-f0-9]+)")


def build_challenge_message(service_name: str, nonce: str) -> str:
    return f"Sign this message to authenticate with {service_name}.\n\nNonce: {nonce}"


class NonceService:
    """Wallet challenge issuer and redeemer.

    Several unused nonces may be outstanding for one address at a time;
    issuing a new one does not invalidate earlier ones.
    """

    def __init__(
        self,
        nonce_repo: NonceRepository,
        *,
        service_name: str = "Rend",
        ttl_seconds: int = 300,
    ) -> None:
        """Initialize nonce service.

        Args:
            nonce_repo: Nonce store with atomic consumption.
            service_name: Name embedded in the challenge message.
            ttl_seconds: Nonce lifetime in seconds.
        """
        self._nonce_repo = nonce_repo
        self._service_name = service_name
        self._ttl_seconds = ttl_seconds

    @property
    def ttl_seconds(self) -> int:
        return self._ttl_seconds

    async def issue_nonce(
        self, wallet_address: str, wallet_scheme: str
    ) -> Result[NonceChallenge, ValidationError]:
        """Issue a fresh challenge for a wallet.

        Args:
            wallet_address: Address as supplied by the client.
            wallet_scheme: "evm" or "solana".

        Returns:
            Success(NonceChallenge) with the nonce and the exact message to
            sign, or Failure(ValidationError) for an unknown scheme or an
            empty address.
        """
        try:
            scheme = parse_wallet_scheme(wallet_scheme)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_WALLET_SCHEME,
                    message=str(e),
                    field="wallet_scheme",
                )
            )

        try:
            address = normalize_wallet_address(wallet_address, scheme)
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_WALLET_ADDRESS,
                    message=str(e),
                    field="wallet_address",
                )
            )

        value = secrets.token_hex(NONCE_BYTES)
        await self._nonce_repo.insert(
            Nonce.issue(
                wallet_address=address,
                value=value,
                ttl_seconds=self._ttl_seconds,
            )
        )

        return Success(
            value=NonceChallenge(
                nonce=value,
                message=build_challenge_message(self._service_name, value),
            )
        )

    async def redeem_nonce(
        self, wallet_address: str, nonce: str
    ) -> Result[Nonce, AuthenticationError]:
        """Consume a nonce exactly once.

        Args:
            wallet_address: Normalized wallet address.
            nonce: Nonce value extracted from the signed message.

        Returns:
            Success(Nonce) marked used, or Failure(INVALID_OR_EXPIRED_NONCE)
            when no matching unused, unexpired nonce exists.
        """
        consumed = await self._nonce_repo.consume(wallet_address, nonce)
        if consumed is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.INVALID_OR_EXPIRED_NONCE,
                    message=AuthErrorMessage.INVALID_NONCE,
                )
            )
        return Success(value=consumed)

    @staticmethod
    def extract_nonce(message: str) -> Result[str, ValidationError]:
        """Parse the nonce out of a signed challenge message.

        Returns:
            Success(nonce), or Failure(INVALID_FORMAT) when the message has
            no ``Nonce: <hex>`` line.
        """
        match = NONCE_PATTERN.search(message or "")
        if match is None:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_FORMAT,
                    message=AuthErrorMessage.INVALID_MESSAGE_FORMAT,
                    field="message",
                )
            )
        return Success(value=match.group(1))
