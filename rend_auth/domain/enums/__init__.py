"""Domain enums.

Available Enums:
    - UserRole: creator, reviewer
    - UserKind: credential strategies present on a user
    - WalletScheme: evm, solana
"""

from rend_auth.domain.enums.user_kind import UserKind
from rend_auth.domain.enums.user_role import UserRole
from rend_auth.domain.enums.wallet_scheme import WalletScheme

__all__ = ["UserKind", "UserRole", "WalletScheme"]
