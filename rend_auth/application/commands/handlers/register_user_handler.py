"""Registration handler for password accounts.

Flow:
1. Validate username, email, password and role
2. Single combined lookup by email or username
3. Hash password
4. Create User entity and check invariants
5. Insert user
6. Issue a session token
7. Emit UserRegistered event
8. Return Success(AuthSession)

An email collision is reported before a username collision.

On failure:
- Emit UserRegistrationFailed event
- Return Failure(error)

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- NO infrastructure imports (repositories are injected via protocols)
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from rend_auth.application.commands.auth_commands import RegisterUser
from rend_auth.application.dtos import AuthSession, UserView
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import (
    ConflictError,
    DomainError,
    InternalError,
    ValidationError,
)
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.entities import User
from rend_auth.domain.enums import UserRole
from rend_auth.domain.errors import AuthErrorMessage, DuplicateKeyError
from rend_auth.domain.events import UserRegistered, UserRegistrationFailed
from rend_auth.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    SessionTokenProtocol,
    UserRepository,
)
from rend_auth.domain.validators import (
    validate_email,
    validate_password,
    validate_user,
    validate_username,
)


class RegistrationError:
    """Registration-specific error reasons."""

    VALIDATION_FAILED = "validation_failed"
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    DATABASE_ERROR = "database_error"


class RegisterUserHandler:
    """Handler for password registration command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (User entity, protocols)
    - Infrastructure layer (repositories, services via dependency injection)
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        session_service: SessionTokenProtocol,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize registration handler with dependencies.

        Args:
            user_repo: User repository for persistence.
            password_service: Password hashing service.
            session_service: Session token issuer.
            event_bus: Event bus for publishing domain events.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._session_service = session_service
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: RegisterUser) -> Result[AuthSession, DomainError]:
        """Handle user registration command.

        Returns:
            Success(AuthSession) on successful registration.
            Failure(ValidationError) for invalid fields.
            Failure(ConflictError) for EMAIL_ALREADY_EXISTS or
            USERNAME_ALREADY_EXISTS.
            Failure(InternalError) on a store fault.

        Side Effects:
            - Creates User in the repository.
            - Publishes UserRegistered / UserRegistrationFailed.
        """
        try:
            # Step 1: Validate input
            try:
                username = validate_username(cmd.username)
                email = validate_email(cmd.email)
                password = validate_password(cmd.password)
                if cmd.role not in UserRole.values():
                    raise ValueError(
                        f"Role must be one of: {', '.join(UserRole.values())}"
                    )
                role = UserRole(cmd.role)
            except ValueError as e:
                return await self._fail(
                    cmd.email,
                    RegistrationError.VALIDATION_FAILED,
                    ValidationError(code=ErrorCode.VALIDATION_FAILED, message=str(e)),
                )

            # Step 2: Check email and username uniqueness
            existing_user = await self._user_repo.find_by_email_or_username(
                email, username
            )
            if existing_user is not None:
                if existing_user.email == email:
                    return await self._fail(
                        email,
                        RegistrationError.EMAIL_ALREADY_EXISTS,
                        _conflict("email"),
                    )
                return await self._fail(
                    email,
                    RegistrationError.USERNAME_ALREADY_EXISTS,
                    _conflict("username"),
                )

            # Step 3: Hash password
            password_hash = self._password_service.hash_password(password)

            # Step 4: Create User entity
            now = datetime.now(UTC)
            user = User(
                id=uuid7(),
                role=role,
                created_at=now,
                updated_at=now,
                username=username,
                email=email,
                password_hash=password_hash,
            )
            validation = validate_user(user)
            if isinstance(validation, Failure):
                return await self._fail(
                    email, RegistrationError.VALIDATION_FAILED, validation.error
                )

            # Step 5: Insert (unique index catches a concurrent registration)
            try:
                await self._user_repo.insert(user)
            except DuplicateKeyError as e:
                reason = (
                    RegistrationError.USERNAME_ALREADY_EXISTS
                    if e.field == "username"
                    else RegistrationError.EMAIL_ALREADY_EXISTS
                )
                return await self._fail(email, reason, _conflict(e.field))

            # Step 6: Issue session token
            token = self._session_service.issue(user.id)

            # Step 7: Emit SUCCEEDED event
            await self._event_bus.publish(
                UserRegistered(user_id=user.id, email=email, role=role.value)
            )

            # Step 8: Return session
            return Success(value=AuthSession(token=token, user=UserView.from_user(user)))

        except Exception as e:
            # Catch-all for store errors or unexpected issues
            self._logger.error("user_registration_error", error=e)
            return await self._fail(
                cmd.email,
                RegistrationError.DATABASE_ERROR,
                InternalError(
                    code=ErrorCode.INTERNAL_ERROR,
                    message=AuthErrorMessage.INTERNAL,
                ),
            )

    async def _fail(
        self, email: str, reason: str, error: DomainError
    ) -> Failure[DomainError]:
        await self._event_bus.publish(UserRegistrationFailed(email=email, reason=reason))
        return Failure(error=error)


def _conflict(field: str) -> ConflictError:
    if field == "username":
        return ConflictError(
            code=ErrorCode.USERNAME_ALREADY_EXISTS,
            message=AuthErrorMessage.USERNAME_TAKEN,
            conflicting_field="username",
        )
    if field == "email":
        return ConflictError(
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            message=AuthErrorMessage.EMAIL_IN_USE,
            conflicting_field="email",
        )
    return ConflictError(
        code=ErrorCode.DUPLICATE_IDENTITY,
        message=AuthErrorMessage.IDENTITY_IN_USE,
        conflicting_field=field,
    )
