"""Fixtures wiring every handler to real in-memory stores and real crypto.

Only the outbound edges are doubles: the logger is a Mock, Google's JWKS is
replaced by a local RSA key, and the token endpoint is served by
pytest-httpx where a test needs it.
"""

from dataclasses import dataclass

import pytest

from rend_auth.application.commands.handlers import (
    AuthenticateFederatedHandler,
    AuthenticateWalletHandler,
    ConfirmPasswordResetHandler,
    IssueNonceHandler,
    LoginUserHandler,
    RegisterUserHandler,
    RequestPasswordResetHandler,
)
from rend_auth.application.queries.handlers import GetCurrentUserHandler
from rend_auth.application.services import (
    IdentityResolver,
    NonceService,
    SignatureVerifierRegistry,
)
from rend_auth.domain.enums import WalletScheme
from rend_auth.domain.events import ALL_AUTH_EVENTS
from rend_auth.infrastructure.email import StubEmailService
from rend_auth.infrastructure.events import InMemoryEventBus
from rend_auth.infrastructure.events.handlers import LoggingEventHandler
from rend_auth.infrastructure.federated import GoogleIdentityVerifier
from rend_auth.infrastructure.persistence import (
    InMemoryNonceRepository,
    InMemoryUserRepository,
)
from rend_auth.infrastructure.security import (
    EvmSignatureVerifier,
    SolanaSignatureVerifier,
)
from tests.utils.google import GoogleTokenFactory, make_provider_config

RESET_URL_BASE = "http://localhost:5000"


class RecordingEventBus(InMemoryEventBus):
    """InMemoryEventBus that also keeps every published event."""

    def __init__(self, logger) -> None:
        super().__init__(logger=logger)
        self.published: list = []

    async def publish(self, event) -> None:
        self.published.append(event)
        await super().publish(event)

    def of_type(self, event_type) -> list:
        return [event for event in self.published if isinstance(event, event_type)]


@dataclass
class AuthStack:
    user_repo: InMemoryUserRepository
    nonce_repo: InMemoryNonceRepository
    mailer: StubEmailService
    event_bus: RecordingEventBus
    google_tokens: GoogleTokenFactory
    issue_nonce: IssueNonceHandler
    authenticate_wallet: AuthenticateWalletHandler
    authenticate_federated: AuthenticateFederatedHandler
    register: RegisterUserHandler
    login: LoginUserHandler
    request_reset: RequestPasswordResetHandler
    confirm_reset: ConfirmPasswordResetHandler
    current_user: GetCurrentUserHandler


@pytest.fixture
def google_tokens() -> GoogleTokenFactory:
    return GoogleTokenFactory()


@pytest.fixture
def stack(
    logger, session_service, password_service, reset_token_service, google_tokens
) -> AuthStack:
    user_repo = InMemoryUserRepository()
    nonce_repo = InMemoryNonceRepository()
    mailer = StubEmailService(logger=logger)

    event_bus = RecordingEventBus(logger=logger)
    logging_handler = LoggingEventHandler(logger=logger)
    for event_type in ALL_AUTH_EVENTS:
        event_bus.subscribe(event_type, logging_handler.handle)

    nonce_service = NonceService(nonce_repo, service_name="Rend", ttl_seconds=300)
    resolver = IdentityResolver(user_repo)
    verifiers = SignatureVerifierRegistry(
        {
            WalletScheme.EVM: EvmSignatureVerifier(),
            WalletScheme.SOLANA: SolanaSignatureVerifier(),
        }
    )
    google = GoogleIdentityVerifier(
        make_provider_config(), signing_key_resolver=google_tokens.resolve_key
    )

    return AuthStack(
        user_repo=user_repo,
        nonce_repo=nonce_repo,
        mailer=mailer,
        event_bus=event_bus,
        google_tokens=google_tokens,
        issue_nonce=IssueNonceHandler(nonce_service, event_bus, logger),
        authenticate_wallet=AuthenticateWalletHandler(
            nonce_service, verifiers, resolver, session_service, event_bus, logger
        ),
        authenticate_federated=AuthenticateFederatedHandler(
            google, resolver, session_service, event_bus, logger
        ),
        register=RegisterUserHandler(
            user_repo, password_service, session_service, event_bus, logger
        ),
        login=LoginUserHandler(
            user_repo, password_service, session_service, event_bus, logger
        ),
        request_reset=RequestPasswordResetHandler(
            user_repo, reset_token_service, mailer, event_bus, logger, RESET_URL_BASE
        ),
        confirm_reset=ConfirmPasswordResetHandler(
            user_repo, password_service, reset_token_service, event_bus, logger
        ),
        current_user=GetCurrentUserHandler(user_repo, session_service),
    )
