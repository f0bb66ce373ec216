"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console/JSON)
- Password hashing (bcrypt)
- Session tokens (JWT)
- Reset tokens (SHA-256 hashed)
- Wallet signature verifiers (secp256k1, Ed25519)
- Federated identity (Google)
- Email (stub/AWS SES)
- Redis client (when the Redis nonce store is selected)

Adapters are imported lazily inside each factory so importing the container
does not import every backend.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from rend_auth.core.config import get_settings

if TYPE_CHECKING:
    from redis.asyncio import Redis

    from rend_auth.application.services import SignatureVerifierRegistry
    from rend_auth.domain.protocols import (
        FederatedIdentityProtocol,
        LoggerProtocol,
        NotificationProtocol,
        PasswordHashingProtocol,
        PasswordResetTokenServiceProtocol,
        SessionTokenProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from rend_auth.infrastructure.logging import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
        service=settings.app_name,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    from rend_auth.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_session_service() -> "SessionTokenProtocol":
    """Get session token service singleton.

    The signing configuration is built once from settings and handed to the
    service; the service never reads settings itself.
    """
    from rend_auth.infrastructure.security import JWTSessionService

    return JWTSessionService(get_settings().session_token_config())


@lru_cache()
def get_reset_token_service() -> "PasswordResetTokenServiceProtocol":
    from rend_auth.infrastructure.security import PasswordResetTokenService

    return PasswordResetTokenService(
        expiration_minutes=get_settings().reset_token_expire_minutes
    )


@lru_cache()
def get_signature_verifier_registry() -> "SignatureVerifierRegistry":
    from rend_auth.application.services import SignatureVerifierRegistry
    from rend_auth.domain.enums import WalletScheme
    from rend_auth.infrastructure.security import (
        EvmSignatureVerifier,
        SolanaSignatureVerifier,
    )

    return SignatureVerifierRegistry(
        {
            WalletScheme.EVM: EvmSignatureVerifier(),
            WalletScheme.SOLANA: SolanaSignatureVerifier(),
        }
    )


@lru_cache()
def get_identity_provider() -> "FederatedIdentityProtocol":
    from rend_auth.infrastructure.federated import GoogleIdentityVerifier

    return GoogleIdentityVerifier(get_settings().federated_provider_config())


@lru_cache()
def get_email_service() -> "NotificationProtocol":
    """Get email service singleton (app-scoped).

    Returns correct adapter based on EMAIL_BACKEND:
        - 'stub': StubEmailService (logs, never sends)
        - 'ses': SESEmailService (AWS SES via boto3)
    """
    settings = get_settings()

    if settings.email_backend == "ses":
        from rend_auth.infrastructure.email import SESEmailService

        return SESEmailService(
            sender=settings.email_from,
            logger=get_logger(),
            region=settings.aws_region,
        )

    from rend_auth.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


@lru_cache()
def get_redis() -> "Redis":
    """Get Redis client singleton (app-scoped, pooled).

    Raises:
        ValueError: If REDIS_URL is not set.
    """
    from redis.asyncio import ConnectionPool, Redis

    settings = get_settings()
    if not settings.redis_url:
        raise ValueError("REDIS_URL is required when NONCE_BACKEND=redis")

    pool = ConnectionPool.from_url(
        settings.redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)
