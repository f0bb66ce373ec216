"""Query handlers."""

from rend_auth.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)

__all__ = ["GetCurrentUserHandler"]
