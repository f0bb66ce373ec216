"""Application DTOs."""

from rend_auth.application.dtos.auth_dtos import AuthSession, NonceChallenge, UserView

__all__ = ["AuthSession", "NonceChallenge", "UserView"]
