"""Issue nonce handler for wallet authentication.

Flow:
1. Validate scheme and address, issue a nonce (NonceService)
2. Emit WalletNonceIssued event
3. Return Success(NonceChallenge)

A client may hold several outstanding challenges for the same wallet.
"""

from rend_auth.application.commands.wallet_commands import IssueNonce
from rend_auth.application.dtos import NonceChallenge
from rend_auth.application.services import NonceService
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import DomainError, InternalError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.events import WalletNonceIssued
from rend_auth.domain.protocols import EventBusProtocol, LoggerProtocol
from rend_auth.domain.validators import normalize_wallet_address, parse_wallet_scheme


class IssueNonceHandler:
    """Handler for wallet challenge issuance."""

    def __init__(
        self,
        nonce_service: NonceService,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize issue nonce handler.

        Args:
            nonce_service: Challenge issuer.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._nonce_service = nonce_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: IssueNonce) -> Result[NonceChallenge, DomainError]:
        """Handle issue nonce command.

        Returns:
            Success(NonceChallenge), Failure(ValidationError) for a bad
            scheme or address, Failure(InternalError) on a store fault.
        """
        try:
            # Step 1: Issue nonce (validates and normalizes)
            result = await self._nonce_service.issue_nonce(
                cmd.wallet_address, cmd.wallet_scheme
            )
            if isinstance(result, Failure):
                return result
            challenge = result.value

            # Step 2: Emit event
            scheme = parse_wallet_scheme(cmd.wallet_scheme)
            await self._event_bus.publish(
                WalletNonceIssued(
                    wallet_address=normalize_wallet_address(cmd.wallet_address, scheme),
                    wallet_scheme=scheme.value,
                    expires_in=self._nonce_service.ttl_seconds,
                )
            )

            # Step 3: Return challenge
            return Success(value=challenge)

        except Exception as e:
            self._logger.error(
                "nonce_issue_failed",
                error=e,
                wallet_scheme=cmd.wallet_scheme,
            )
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=AuthErrorMessage.INTERNAL,
                )
            )
