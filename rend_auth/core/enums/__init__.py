"""Core enums package.

Usage:
    from rend_auth.core.enums import ErrorCode, Environment
"""

from rend_auth.core.enums.environment import Environment
from rend_auth.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
