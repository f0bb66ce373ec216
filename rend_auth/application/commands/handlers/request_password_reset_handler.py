"""Request Password Reset handler.

Flow:
1. Require an email address
2. Look up user by email
3. If user not found: return the generic success (no user enumeration)
4. Generate reset token, store its hash and expiry on the user
5. Send notification with the reset link (raw token)
6. Emit PasswordResetRequested event
7. Return Success (always the same payload)

If the notification cannot be sent, the stored reset fields are cleared
before NOTIFICATION_FAILED is returned, so no valid token is left behind
that the user never received.

Security:
- Same response whether or not the email exists
- Only the SHA-256 hash of the token is persisted
- Token expires after the configured lifetime (default 1 hour)
"""

from dataclasses import dataclass

from rend_auth.application.commands.auth_commands import RequestPasswordReset
from rend_auth.core.constants import RESET_PASSWORD_PATH, TOKEN_LOG_PREFIX_LENGTH
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import DomainError, InternalError, ValidationError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.events import PasswordResetRequested, PasswordResetRequestFailed
from rend_auth.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    Notification,
    NotificationProtocol,
    PasswordResetTokenServiceProtocol,
    UserRepository,
)

RESET_EMAIL_SUBJECT = "Password reset token"


class PasswordResetRequestError:
    """Password reset request error reasons."""

    MISSING_EMAIL = "missing_email"
    USER_NOT_FOUND = "user_not_found"
    NOTIFICATION_FAILED = "notification_failed"
    DATABASE_ERROR = "database_error"


@dataclass
class PasswordResetRequestResponse:
    """Response data for password reset request.

    Always returns the same message regardless of whether email exists
    to prevent user enumeration attacks.
    """

    message: str = AuthErrorMessage.RESET_EMAIL_SENT


class RequestPasswordResetHandler:
    """Handler for password reset request command."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_service: PasswordResetTokenServiceProtocol,
        notification_service: NotificationProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        reset_url_base: str,
    ) -> None:
        """Initialize password reset request handler.

        Args:
            user_repo: User repository for lookup and persistence.
            token_service: Reset token generation and hashing.
            notification_service: Notification sink (email).
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
            reset_url_base: Base URL for reset links (no trailing slash).
        """
        self._user_repo = user_repo
        self._token_service = token_service
        self._notification_service = notification_service
        self._event_bus = event_bus
        self._logger = logger
        self._reset_url_base = reset_url_base.rstrip("/")

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequestResponse, DomainError]:
        """Handle password reset request command.

        Returns:
            Success(PasswordResetRequestResponse) whether or not the user
            exists.
            Failure(ValidationError) when no email was given.
            Failure(NotificationError(NOTIFICATION_FAILED)) when the reset
            email could not be sent.
            Failure(InternalError) on a store fault.
        """
        # Step 1: Require an email address
        if not cmd.email or not cmd.email.strip():
            await self._publish_failed(cmd.email, PasswordResetRequestError.MISSING_EMAIL)
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Please provide an email address",
                    field="email",
                )
            )
        email = cmd.email.strip().lower()

        try:
            # Step 2: Look up user by email
            user = await self._user_repo.find_by_email(email)

            # Step 3: Unknown email gets the same response
            if user is None:
                await self._publish_failed(
                    email, PasswordResetRequestError.USER_NOT_FOUND
                )
                return Success(value=PasswordResetRequestResponse())

            # Step 4: Store token hash and expiry
            token = self._token_service.generate_token()
            user.set_reset_token(
                self._token_service.hash_token(token),
                self._token_service.calculate_expiration(),
            )
            await self._user_repo.update(user)

            # Step 5: Send notification containing the raw token
            reset_url = f"{self._reset_url_base}{RESET_PASSWORD_PATH}/{token}"
            send_result = await self._notification_service.send(
                Notification(
                    recipient=email,
                    subject=RESET_EMAIL_SUBJECT,
                    body=(
                        "You are receiving this email because you (or someone "
                        "else) has requested the reset of a password. Please "
                        f"make a PUT request to: \n\n {reset_url}"
                    ),
                )
            )
            if isinstance(send_result, Failure):
                user.clear_reset_token()
                await self._user_repo.update(user)
                self._logger.warning(
                    "password_reset_email_failed",
                    user_id=str(user.id),
                    token_prefix=token[:TOKEN_LOG_PREFIX_LENGTH],
                )
                await self._publish_failed(
                    email, PasswordResetRequestError.NOTIFICATION_FAILED
                )
                return Failure(error=send_result.error)

            # Step 6: Emit SUCCEEDED event
            await self._event_bus.publish(
                PasswordResetRequested(user_id=user.id, email=email)
            )

            # Step 7: Return generic success
            return Success(value=PasswordResetRequestResponse())

        except Exception as e:
            self._logger.error("password_reset_request_error", error=e)
            await self._publish_failed(email, PasswordResetRequestError.DATABASE_ERROR)
            return Failure(
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=AuthErrorMessage.INTERNAL,
                )
            )

    async def _publish_failed(self, email: str, reason: str) -> None:
        await self._event_bus.publish(
            PasswordResetRequestFailed(email=email or "", reason=reason)
        )
