"""Federated (Google) authentication handler.

Accepts either an ID token obtained by the client (AuthenticateFederated)
or an authorization code from the OAuth redirect (AuthenticateFederatedCode).
Both end in the same identity resolution.

Flow:
1. Check the provider is configured
2. Verify the assertion (or exchange the code and verify the ID token)
3. Resolve the user: by federated id, else link by email, else create
4. Emit FederatedIdentityLinked event when an existing user was linked
5. Issue a session token
6. Emit FederatedAuthenticationSucceeded event
7. Return Success(AuthSession)

On failure:
- Emit FederatedAuthenticationFailed event
- Return Failure(error)
"""

from rend_auth.application.commands.federated_commands import (
    AuthenticateFederated,
    AuthenticateFederatedCode,
)
from rend_auth.application.dtos import AuthSession, UserView
from rend_auth.application.services import IdentityResolver
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import (
    AuthenticationError,
    ConfigurationError,
    DomainError,
    InternalError,
)
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.events import (
    FederatedAuthenticationFailed,
    FederatedAuthenticationSucceeded,
    FederatedIdentityLinked,
)
from rend_auth.domain.protocols import (
    EventBusProtocol,
    FederatedIdentityProtocol,
    LoggerProtocol,
    SessionTokenProtocol,
)


class FederatedAuthenticationReason:
    """Federated authentication failure reasons (event payloads)."""

    PROVIDER_UNCONFIGURED = "provider_unconfigured"
    INVALID_ASSERTION = "invalid_assertion"
    RESOLUTION_FAILED = "identity_resolution_failed"
    INTERNAL_ERROR = "internal_error"


class AuthenticateFederatedHandler:
    """Handler for federated login by ID token or authorization code."""

    def __init__(
        self,
        identity_provider: FederatedIdentityProtocol,
        identity_resolver: IdentityResolver,
        session_service: SessionTokenProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize federated authentication handler.

        Args:
            identity_provider: Federated provider adapter (Google).
            identity_resolver: Federated user find/link/create.
            session_service: Session token issuer.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._identity_provider = identity_provider
        self._identity_resolver = identity_resolver
        self._session_service = session_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: AuthenticateFederated | AuthenticateFederatedCode
    ) -> Result[AuthSession, DomainError]:
        """Handle federated authentication command.

        Returns:
            Success(AuthSession) for a valid assertion.
            Failure(ConfigurationError(PROVIDER_UNCONFIGURED)) when the OAuth
            client is not configured (a server-side fault).
            Failure(AuthenticationError(INVALID_ASSERTION)) for any
            verification or code exchange failure.
            Failure(ConflictError(DUPLICATE_IDENTITY)) when a new user's
            derived username is taken.
            Failure(InternalError) on a store fault.
        """
        try:
            # Step 1: Provider configured?
            if not self._identity_provider.is_configured():
                return await self._fail(
                    FederatedAuthenticationReason.PROVIDER_UNCONFIGURED,
                    ConfigurationError(
                        code=ErrorCode.PROVIDER_UNCONFIGURED,
                        message=AuthErrorMessage.PROVIDER_UNCONFIGURED,
                    ),
                )

            # Step 2: Verify assertion
            if isinstance(cmd, AuthenticateFederatedCode):
                claims_result = await self._identity_provider.exchange_code(cmd.code)
            else:
                claims_result = await self._identity_provider.verify(
                    cmd.assertion_token
                )
            if isinstance(claims_result, Failure):
                self._logger.warning(
                    "federated_assertion_rejected",
                    reason=claims_result.error,
                )
                return await self._fail(
                    FederatedAuthenticationReason.INVALID_ASSERTION,
                    AuthenticationError(
                        code=ErrorCode.INVALID_ASSERTION,
                        message=AuthErrorMessage.INVALID_ASSERTION,
                    ),
                )
            claims = claims_result.value

            # Step 3: Resolve user
            resolve_result = await self._identity_resolver.resolve_federated_user(
                claims
            )
            if isinstance(resolve_result, Failure):
                return await self._fail(
                    FederatedAuthenticationReason.RESOLUTION_FAILED,
                    resolve_result.error,
                )
            resolved = resolve_result.value

            # Step 4: Emit LINKED event
            if resolved.linked:
                await self._event_bus.publish(
                    FederatedIdentityLinked(
                        user_id=resolved.user.id,
                        federated_id=claims.subject_id,
                        email=resolved.user.email or "",
                    )
                )

            # Step 5: Issue session token
            token = self._session_service.issue(resolved.user.id)

            # Step 6: Emit SUCCEEDED event
            await self._event_bus.publish(
                FederatedAuthenticationSucceeded(
                    user_id=resolved.user.id,
                    federated_id=claims.subject_id,
                    created=resolved.created,
                )
            )

            # Step 7: Return session
            return Success(
                value=AuthSession(token=token, user=UserView.from_user(resolved.user))
            )

        except Exception as e:
            self._logger.error("federated_authentication_error", error=e)
            return await self._fail(
                FederatedAuthenticationReason.INTERNAL_ERROR,
                InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=AuthErrorMessage.INTERNAL,
                ),
            )

    async def _fail(self, reason: str, error: DomainError) -> Failure[DomainError]:
        await self._event_bus.publish(FederatedAuthenticationFailed(reason=reason))
        return Failure(error=error)
