"""Role-based route restriction."""

from rend_auth.application.dtos import UserView
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import AuthorizationError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.entities import User
from rend_auth.domain.enums import UserRole
from rend_auth.domain.errors import AuthErrorMessage


def require_role(
    user: User | UserView, role: UserRole | str
) -> Result[User | UserView, AuthorizationError]:
    """Allow the user through only when they hold ``role``.

    Args:
        user: Authenticated user (entity or view).
        role: Required role.

    Returns:
        Success(user), or Failure(AuthorizationError(PERMISSION_DENIED)).

    Example:
        >>> match require_role(current_user, UserRole.REVIEWER):
        ...     case Failure(error=error):
        ...         return error
    """
    required = UserRole(role)
    actual = user.role if isinstance(user.role, UserRole) else UserRole(user.role)
    if actual != required:
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=AuthErrorMessage.ACCESS_DENIED,
                required_role=required.value,
            )
        )
    return Success(value=user)
