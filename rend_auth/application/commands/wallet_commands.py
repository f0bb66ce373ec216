"""Wallet authentication commands."""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class IssueNonce:
    """Request a wallet challenge.

    Attributes:
        wallet_address: Wallet address as supplied by the client.
        wallet_scheme: "evm" or "solana".
    """

    wallet_address: str
    wallet_scheme: str


@dataclass(frozen=True, kw_only=True)
class AuthenticateWallet:
    """Authenticate with a signed wallet challenge.

    Attributes:
        wallet_address: Wallet address that signed the challenge.
        wallet_scheme: "evm" or "solana".
        signature: Signature in the scheme's wire encoding.
        message: The challenge message exactly as signed.

    Example:
        >>> command = AuthenticateWallet(
        ...     wallet_address="0xAbC...",
        ...     wallet_scheme="evm",
        ...     signature="0x...",
        ...     message=challenge.message,
        ... )
    """

    wallet_address: str
    wallet_scheme: str
    signature: str
    message: str
