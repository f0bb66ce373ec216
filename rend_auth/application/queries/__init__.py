"""Queries (CQRS read operations)."""

from rend_auth.application.queries.auth_queries import GetCurrentUser

__all__ = ["GetCurrentUser"]
