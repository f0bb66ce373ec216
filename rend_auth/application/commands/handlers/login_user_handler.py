"""Login handler for password accounts.

Flow:
1. Require email and password
2. Find user by email
3. Verify password (against a dummy hash when there is nothing to compare)
4. Issue a session token
5. Emit UserLoginSucceeded event
6. Return Success(AuthSession)

Unknown email, password-less account and wrong password all fail with the
same INVALID_CREDENTIALS error, and all three run one bcrypt comparison.

On failure:
- Emit UserLoginFailed event
- Return Failure(error)
"""

from uuid import UUID

from rend_auth.application.commands.auth_commands import LoginUser
from rend_auth.application.dtos import AuthSession, UserView
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import (
    AuthenticationError,
    DomainError,
    InternalError,
    ValidationError,
)
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.events import UserLoginFailed, UserLoginSucceeded
from rend_auth.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    SessionTokenProtocol,
    UserRepository,
)


class LoginError:
    """Login-specific error reasons."""

    MISSING_FIELDS = "missing_fields"
    USER_NOT_FOUND = "user_not_found"
    NO_PASSWORD = "no_password"
    INVALID_PASSWORD = "invalid_password"
    DATABASE_ERROR = "database_error"


class LoginUserHandler:
    """Handler for email/password login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        session_service: SessionTokenProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing/verification service.
            session_service: Session token issuer.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._session_service = session_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: LoginUser) -> Result[AuthSession, DomainError]:
        """Handle user login command.

        Returns:
            Success(AuthSession) on a correct password.
            Failure(ValidationError) when email or password is missing.
            Failure(AuthenticationError(INVALID_CREDENTIALS)) otherwise.
            Failure(InternalError) on a store fault.
        """
        try:
            # Step 1: Require email and password
            if not cmd.email or not cmd.password:
                return await self._fail(
                    cmd.email,
                    LoginError.MISSING_FIELDS,
                    error=ValidationError(
                        code=ErrorCode.VALIDATION_FAILED,
                        message="Please provide an email and password",
                    ),
                )
            email = cmd.email.strip().lower()

            # Step 2: Find user by email
            user = await self._user_repo.find_by_email(email)

            # Step 3: Verify password (same bcrypt work on every branch)
            stored_hash = (
                user.password_hash
                if user is not None and user.password_hash is not None
                else self._password_service.dummy_hash
            )
            password_ok = self._password_service.verify_password(
                cmd.password, stored_hash
            )

            if user is None:
                return await self._fail(email, LoginError.USER_NOT_FOUND)
            if user.password_hash is None:
                return await self._fail(email, LoginError.NO_PASSWORD, user.id)
            if not password_ok:
                return await self._fail(email, LoginError.INVALID_PASSWORD, user.id)

            # Step 4: Issue session token
            token = self._session_service.issue(user.id)

            # Step 5: Emit SUCCEEDED event
            await self._event_bus.publish(
                UserLoginSucceeded(user_id=user.id, email=email)
            )

            # Step 6: Return session
            return Success(value=AuthSession(token=token, user=UserView.from_user(user)))

        except Exception as e:
            self._logger.error("user_login_error", error=e)
            return await self._fail(
                cmd.email,
                LoginError.DATABASE_ERROR,
                error=InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=AuthErrorMessage.INTERNAL,
                ),
            )

    async def _fail(
        self,
        email: str,
        reason: str,
        user_id: UUID | None = None,
        error: DomainError | None = None,
    ) -> Failure[DomainError]:
        await self._event_bus.publish(
            UserLoginFailed(email=email, reason=reason, user_id=user_id)
        )
        # Use generic message to prevent user enumeration
        return Failure(
            error=error
            or AuthenticationError(
                code=ErrorCode.INVALID_CREDENTIALS,
                message=AuthErrorMessage.INVALID_CREDENTIALS,
            )
        )
