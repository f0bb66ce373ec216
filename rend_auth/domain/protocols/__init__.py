"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; none inherit from them.
"""

from rend_auth.domain.protocols.event_bus_protocol import (
    EventBusProtocol,
    EventHandler,
)
from rend_auth.domain.protocols.federated_identity_protocol import (
    FederatedClaims,
    FederatedIdentityProtocol,
)
from rend_auth.domain.protocols.logger_protocol import LoggerProtocol
from rend_auth.domain.protocols.nonce_repository import NonceRepository
from rend_auth.domain.protocols.notification_protocol import (
    Notification,
    NotificationProtocol,
)
from rend_auth.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from rend_auth.domain.protocols.password_reset_token_service_protocol import (
    PasswordResetTokenServiceProtocol,
)
from rend_auth.domain.protocols.session_token_protocol import SessionTokenProtocol
from rend_auth.domain.protocols.signature_verifier_protocol import (
    SignatureVerifierProtocol,
)
from rend_auth.domain.protocols.user_repository import UserRepository

__all__ = [
    "EventBusProtocol",
    "EventHandler",
    "FederatedClaims",
    "FederatedIdentityProtocol",
    "LoggerProtocol",
    "NonceRepository",
    "Notification",
    "NotificationProtocol",
    "PasswordHashingProtocol",
    "PasswordResetTokenServiceProtocol",
    "SessionTokenProtocol",
    "SignatureVerifierProtocol",
    "UserRepository",
]
