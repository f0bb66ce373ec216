"""Nonce domain entity for wallet challenges.

A nonce backs at most one successful wallet authentication. It is consumed
exactly once, and only before it expires.
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime, timedelta


@dataclass(frozen=True, slots=True, kw_only=True)
class Nonce:
    """Single-use wallet challenge.

    Attributes:
        wallet_address: Normalized wallet address the challenge was issued to.
        value: Hex-encoded random nonce (unique).
        used: True once consumed.
        created_at: Issue time (UTC).
        expires_at: Absolute expiry (created_at + TTL).
    """

    wallet_address: str
    value: str
    created_at: datetime
    expires_at: datetime
    used: bool = False

    @classmethod
    def issue(
        cls,
        *,
        wallet_address: str,
        value: str,
        ttl_seconds: int,
        now: datetime | None = None,
    ) -> "Nonce":
        """Create a fresh, unused nonce that expires after ``ttl_seconds``."""
        created_at = now or datetime.now(UTC)
        return cls(
            wallet_address=wallet_address,
            value=value,
            created_at=created_at,
            expires_at=created_at + timedelta(seconds=ttl_seconds),
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_at <= (now or datetime.now(UTC))

    def is_redeemable(self, now: datetime | None = None) -> bool:
        return not self.used and not self.is_expired(now)

    def mark_used(self) -> "Nonce":
        """Return a consumed copy of this nonce."""
        return replace(self, used=True)

    @property
    def ttl_remaining(self) -> int:
        """Whole seconds left before expiry (0 when expired)."""
        remaining = (self.expires_at - datetime.now(UTC)).total_seconds()
        return max(int(remaining), 0)
