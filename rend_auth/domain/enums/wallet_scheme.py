"""Wallet signing schemes.

A wallet scheme fixes the curve, the address format and the verification
algorithm used for a wallet challenge.
"""

from enum import Enum


class WalletScheme(str, Enum):
    """Supported wallet signing schemes.

    Values:
        EVM: secp256k1 recoverable signatures, hex addresses (case-insensitive).
        SOLANA: Ed25519 detached signatures, base58 addresses (case-sensitive).
    """

    EVM = "evm"
    SOLANA = "solana"

    @classmethod
    def values(cls) -> list[str]:
        return [scheme.value for scheme in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in cls.values()
