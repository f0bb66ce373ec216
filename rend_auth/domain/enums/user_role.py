"""User roles.

Every user carries exactly one role. Role checks are plain equality; there
is no hierarchy between the two roles.

Usage:
    from rend_auth.domain.enums import UserRole

    if user.role == UserRole.REVIEWER:
        ...
"""

from enum import Enum


class UserRole(str, Enum):
    """User roles.

    String Enum:
        Inherits from str for easy serialization into tokens and views.
    """

    CREATOR = "creator"
    REVIEWER = "reviewer"

    @classmethod
    def values(cls) -> list[str]:
        return [role.value for role in cls]
