"""Domain entities."""

from rend_auth.domain.entities.nonce import Nonce
from rend_auth.domain.entities.user import User

__all__ = ["Nonce", "User"]
