"""User kinds derived from the credentials present on a user record.

All kinds share one record shape. The kind is never stored; it is computed
from which credentials are set (see ``User.kind``).
"""

from enum import Enum


class UserKind(str, Enum):
    """Which credential strategies a user can authenticate with.

    Values:
        PASSWORD: Only a password hash is set.
        WALLET: Only a wallet address (with scheme) is set.
        FEDERATED: Only a federated identity id is set.
        COMBINED: Two or more of the above are set.
    """

    PASSWORD = "password"
    WALLET = "wallet"
    FEDERATED = "federated"
    COMBINED = "combined"
