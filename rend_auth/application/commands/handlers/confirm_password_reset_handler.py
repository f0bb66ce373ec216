"""Confirm Password Reset handler.

Flow:
1. Hash the inbound token
2. Look up user by token hash
3. Verify token not expired (expiry is exclusive)
4. Validate and hash the new password
5. Set password, clear reset fields, persist
6. Emit PasswordResetCompleted event
7. Return Success(message)

On failure:
- Emit PasswordResetFailed event
- Return Failure(error)

No session is issued; the user logs in again with the new password.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from rend_auth.application.commands.auth_commands import ConfirmPasswordReset
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import (
    AuthenticationError,
    DomainError,
    InternalError,
    ValidationError,
)
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.events import PasswordResetCompleted, PasswordResetFailed
from rend_auth.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    PasswordResetTokenServiceProtocol,
    UserRepository,
)
from rend_auth.domain.validators import validate_password, validate_user


class PasswordResetConfirmError:
    """Password reset confirmation error reasons."""

    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_EXPIRED = "token_expired"
    INVALID_PASSWORD = "invalid_password"
    DATABASE_ERROR = "database_error"


@dataclass
class PasswordResetConfirmResponse:
    """Response data for successful password reset confirmation."""

    message: str = AuthErrorMessage.PASSWORD_RESET_SUCCESS


class ConfirmPasswordResetHandler:
    """Handler for confirm password reset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        token_service: PasswordResetTokenServiceProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize confirm password reset handler.

        Args:
            user_repo: User repository for lookup and persistence.
            password_service: Password hashing service.
            token_service: Reset token hashing.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._token_service = token_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: ConfirmPasswordReset
    ) -> Result[PasswordResetConfirmResponse, DomainError]:
        """Handle confirm password reset command.

        Returns:
            Success(PasswordResetConfirmResponse) once the password changed.
            Failure(AuthenticationError(INVALID_OR_EXPIRED_TOKEN)) for an
            unknown or expired token.
            Failure(ValidationError(INVALID_PASSWORD)) for a bad password.
            Failure(InternalError) on a store fault.

        Side Effects:
            - Replaces the password hash and clears the reset fields.
        """
        try:
            # Step 1: Hash the inbound token
            if not cmd.token:
                return await self._fail(PasswordResetConfirmError.TOKEN_NOT_FOUND)
            token_hash = self._token_service.hash_token(cmd.token)

            # Step 2: Look up user by token hash
            user = await self._user_repo.find_by_reset_token_hash(token_hash)
            if user is None:
                return await self._fail(PasswordResetConfirmError.TOKEN_NOT_FOUND)

            # Step 3: Verify token not expired
            if not user.is_reset_token_valid(datetime.now(UTC)):
                return await self._fail(
                    PasswordResetConfirmError.TOKEN_EXPIRED, user_id=user.id
                )

            # Step 4: Validate and hash the new password
            try:
                new_password = validate_password(cmd.new_password or "")
            except ValueError as e:
                return await self._fail(
                    PasswordResetConfirmError.INVALID_PASSWORD,
                    user_id=user.id,
                    error=ValidationError(
                        code=ErrorCode.INVALID_PASSWORD,
                        message=str(e),
                        field="password",
                    ),
                )
            password_hash = self._password_service.hash_password(new_password)

            # Step 5: Set password, clear reset fields, persist
            user.set_password_hash(password_hash)
            user.clear_reset_token()
            validation = validate_user(user)
            if isinstance(validation, Failure):
                return await self._fail(
                    PasswordResetConfirmError.INVALID_PASSWORD,
                    user_id=user.id,
                    error=validation.error,
                )
            await self._user_repo.update(user)

            # Step 6: Emit SUCCEEDED event
            await self._event_bus.publish(PasswordResetCompleted(user_id=user.id))

            # Step 7: Return success
            return Success(value=PasswordResetConfirmResponse())

        except Exception as e:
            self._logger.error("password_reset_confirm_error", error=e)
            return await self._fail(
                PasswordResetConfirmError.DATABASE_ERROR,
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=AuthErrorMessage.INTERNAL,
                ),
            )

    async def _fail(
        self,
        reason: str,
        user_id: UUID | None = None,
        error: DomainError | None = None,
    ) -> Failure[DomainError]:
        await self._event_bus.publish(
            PasswordResetFailed(reason=reason, user_id=user_id)
        )
        return Failure(
            error=error
            or AuthenticationError(
                code=ErrorCode.INVALID_OR_EXPIRED_TOKEN,
                message=AuthErrorMessage.INVALID_RESET_TOKEN,
            )
        )
