"""Get current user query handler.

Resolves the bearer session token in an Authorization header to the user
it was issued for.
"""

from rend_auth.application.dtos import UserView
from rend_auth.application.queries.auth_queries import GetCurrentUser
from rend_auth.application.services import extract_bearer_token
from rend_auth.core.enums import ErrorCode
from rend_auth.core.errors import AuthenticationError
from rend_auth.core.result import Failure, Result, Success
from rend_auth.domain.errors import AuthErrorMessage
from rend_auth.domain.protocols import SessionTokenProtocol, UserRepository


class GetCurrentUserHandler:
    """Handler for the current user query.

    Every failure (missing or malformed header, invalid token, user gone)
    is the same UNAUTHORIZED error.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        session_service: SessionTokenProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            user_repo: User repository for lookup.
            session_service: Session token verifier.
        """
        self._user_repo = user_repo
        self._session_service = session_service

    async def handle(
        self, query: GetCurrentUser
    ) -> Result[UserView, AuthenticationError]:
        """Handle get current user query.

        Returns:
            Success(UserView), or Failure(AuthenticationError(UNAUTHORIZED)).
        """
        # Step 1: Parse bearer token
        token = extract_bearer_token(query.authorization_header)

        # Step 2: Verify token
        verify_result = self._session_service.verify(token)
        if isinstance(verify_result, Failure):
            return verify_result

        # Step 3: Load user
        user = await self._user_repo.find_by_id(verify_result.value)
        if user is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.UNAUTHORIZED,
                    message=AuthErrorMessage.NOT_AUTHORIZED,
                )
            )

        return Success(value=UserView.from_user(user))
