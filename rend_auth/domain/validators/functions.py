"""Identity field validation functions.

Validators are pure functions that normalize their input and raise
ValueError on validation failure. Handlers translate the ValueError into a
``ValidationError`` carried in a ``Failure``.
"""

import re

from rend_auth.core.constants import (
    FEDERATED_USERNAME_PREFIX,
    FEDERATED_USERNAME_SUFFIX_LENGTH,
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
)
from rend_auth.domain.enums import WalletScheme

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
WHITESPACE_PATTERN = re.compile(r"\s+")


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (trimmed, lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("  User@Example.COM ")
        'user@example.com'
    """
    normalized = v.strip().lower()
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError("Please provide a valid email")
    return normalized


def validate_username(v: str) -> str:
    """Validate username (trimmed, case preserved, at least 3 characters)."""
    username = v.strip()
    if len(username) < MIN_USERNAME_LENGTH:
        raise ValueError(
            f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
        )
    return username


def validate_password(v: str) -> str:
    """Validate password length.

    bcrypt only hashes the first 72 bytes, so longer passwords are rejected
    instead of being silently truncated.

    Raises:
        ValueError: If password is too short or too long.
    """
    if len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if len(v.encode("utf-8")) > MAX_PASSWORD_LENGTH:
        raise ValueError(
            f"Password must be at most {MAX_PASSWORD_LENGTH} bytes long"
        )
    return v


def parse_wallet_scheme(v: str | WalletScheme) -> WalletScheme:
    """Parse a wallet scheme tag.

    Raises:
        ValueError: If the tag is not one of evm, solana.
    """
    try:
        return WalletScheme(v)
    except ValueError:
        raise ValueError(
            f"Wallet type must be one of: {', '.join(WalletScheme.values())}"
        ) from None


def normalize_wallet_address(address: str, scheme: WalletScheme) -> str:
    """Normalize a wallet address for its scheme.

    EVM addresses are hex and case-insensitive, so they are lowercased.
    Solana addresses are base58 and case-sensitive, so they are only trimmed.

    Raises:
        ValueError: If the address is empty.
    """
    normalized = address.strip() if address else ""
    if not normalized:
        raise ValueError("Wallet address is required")
    if scheme == WalletScheme.EVM:
        return normalized.lower()
    return normalized


def derive_federated_username(display_name: str | None, federated_id: str) -> str:
    """Derive a username for a user created by federated login.

    The display name with all whitespace removed, lowercased. Without a
    usable display name, ``user_`` plus the last 8 characters of the
    federated id. Collisions with existing usernames are not resolved here.

    Example:
        >>> derive_federated_username("Ada Lovelace", "1098765432101234")
        'adalovelace'
        >>> derive_federated_username(None, "1098765432101234")
        'user_32101234'
    """
    if display_name:
        slug = WHITESPACE_PATTERN.sub("", display_name).lower()
        if len(slug) >= MIN_USERNAME_LENGTH:
            return slug
    suffix = federated_id[-FEDERATED_USERNAME_SUFFIX_LENGTH:]
    return f"{FEDERATED_USERNAME_PREFIX}{suffix}"
