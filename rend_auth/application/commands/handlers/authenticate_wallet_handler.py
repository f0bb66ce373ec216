"""Wallet authentication handler (challenge/response).

Flow:
1. Validate scheme and inputs, normalize the address
2. Extract the nonce from the signed message
3. Redeem the nonce (single use)
4. Verify the signature with the scheme's verifier
5. Resolve the wallet user (find-or-create, mark wallet_authenticated)
6. Issue a session token
7. Emit WalletAuthenticationSucceeded event
8. Return Success(AuthSession)

The nonce is redeemed before the signature is checked, so a request with a
bad signature still burns the nonce and the client must fetch a new one.

On failure:
- Emit WalletAuthenticationFailed event
- Return Failure(error)
"""

from rend_auth.application.commands.wallet_commands import AuthenticateWallet
from rend_auth.application.dtos import AuthSession, UserView
from rend_auth.application.services import (
    IdentityResolver,
    NonceService,
    SignatureVerifierRegistry,
)
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import (
    AuthenticationError,
    DomainError,
    InternalError,
    ValidationError,
)
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.events import (
    WalletAuthenticationFailed,
    WalletAuthenticationSucceeded,
)
from rend_auth.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    SessionTokenProtocol,
)
from rend_auth.domain.validators import normalize_wallet_address, parse_wallet_scheme


class WalletAuthenticationReason:
    """Wallet authentication failure reasons (event payloads)."""

    INVALID_INPUT = "invalid_input"
    INVALID_MESSAGE_FORMAT = "invalid_message_format"
    INVALID_NONCE = "invalid_nonce"
    INVALID_SIGNATURE = "invalid_signature"
    RESOLUTION_FAILED = "identity_resolution_failed"
    INTERNAL_ERROR = "internal_error"


class AuthenticateWalletHandler:
    """Handler for wallet signature authentication.

    Steps run strictly in sequence; nothing is retried except a lost
    first-login insert race inside the identity resolver.
    """

    def __init__(
        self,
        nonce_service: NonceService,
        verifier_registry: SignatureVerifierRegistry,
        identity_resolver: IdentityResolver,
        session_service: SessionTokenProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize wallet authentication handler.

        Args:
            nonce_service: Challenge redeemer.
            verifier_registry: Signature verifier per wallet scheme.
            identity_resolver: Wallet user find-or-create.
            session_service: Session token issuer.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._nonce_service = nonce_service
        self._verifier_registry = verifier_registry
        self._identity_resolver = identity_resolver
        self._session_service = session_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: AuthenticateWallet) -> Result[AuthSession, DomainError]:
        """Handle wallet authentication command.

        Returns:
            Success(AuthSession) on a valid signature over a live nonce.
            Failure(ValidationError) for bad input or message format.
            Failure(AuthenticationError) for INVALID_OR_EXPIRED_NONCE or
            INVALID_SIGNATURE.
            Failure(ConflictError) when the wallet user cannot be stored.
            Failure(InternalError) on a store fault.

        Side Effects:
            - Consumes the nonce (even when the signature is rejected).
            - Creates or updates the wallet user.
            - Publishes WalletAuthenticationSucceeded / WalletAuthenticationFailed.
        """
        try:
            # Step 1: Validate scheme and inputs
            try:
                scheme = parse_wallet_scheme(cmd.wallet_scheme)
                address = normalize_wallet_address(cmd.wallet_address, scheme)
            except ValueError as e:
                return await self._fail(
                    cmd,
                    WalletAuthenticationReason.INVALID_INPUT,
                    ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message=str(e),
                    ),
                )

            verifier = self._verifier_registry.get(scheme)
            if not cmd.signature or not cmd.message or verifier is None:
                return await self._fail(
                    cmd,
                    WalletAuthenticationReason.INVALID_INPUT,
                    ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message="Wallet address, signature and message are required",
                    ),
                )

            # Step 2: Extract nonce from the signed message
            nonce_result = self._nonce_service.extract_nonce(cmd.message)
            if isinstance(nonce_result, Failure):
                return await self._fail(
                    cmd,
                    WalletAuthenticationReason.INVALID_MESSAGE_FORMAT,
                    nonce_result.error,
                )

            # Step 3: Redeem nonce (burned even if the signature is bad)
            redeem_result = await self._nonce_service.redeem_nonce(
                address, nonce_result.value
            )
            if isinstance(redeem_result, Failure):
                return await self._fail(
                    cmd,
                    WalletAuthenticationReason.INVALID_NONCE,
                    redeem_result.error,
                )

            # Step 4: Verify signature
            if not verifier.verify_signature(cmd.message, cmd.signature, address):
                return await self._fail(
                    cmd,
                    WalletAuthenticationReason.INVALID_SIGNATURE,
                    AuthenticationError(
                        code=ErrorCode.INVALID_SIGNATURE,
                        message=AuthErrorMessage.INVALID_SIGNATURE,
                    ),
                )

            # Step 5: Resolve wallet user
            resolve_result = await self._identity_resolver.resolve_wallet_user(
                address, scheme
            )
            if isinstance(resolve_result, Failure):
                return await self._fail(
                    cmd,
                    WalletAuthenticationReason.RESOLUTION_FAILED,
                    resolve_result.error,
                )
            resolved = resolve_result.value

            # Step 6: Issue session token
            token = self._session_service.issue(resolved.user.id)

            # Step 7: Emit SUCCEEDED event
            await self._event_bus.publish(
                WalletAuthenticationSucceeded(
                    user_id=resolved.user.id,
                    wallet_address=address,
                    wallet_scheme=scheme.value,
                    created=resolved.created,
                )
            )

            # Step 8: Return session
            return Success(
                value=AuthSession(token=token, user=UserView.from_user(resolved.user))
            )

        except Exception as e:
            self._logger.error(
                "wallet_authentication_error",
                error=e,
                wallet_scheme=cmd.wallet_scheme,
            )
            return await self._fail(
                cmd,
                WalletAuthenticationReason.INTERNAL_ERROR,
                InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=AuthErrorMessage.INTERNAL,
                ),
            )

    async def _fail(
        self, cmd: AuthenticateWallet, reason: str, error: DomainError
    ) -> Failure[DomainError]:
        await self._event_bus.publish(
            WalletAuthenticationFailed(
                wallet_address=cmd.wallet_address,
                reason=reason,
            )
        )
        return Failure(error=error)
