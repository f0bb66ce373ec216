"""User-visible authentication error messages.

These are NOT exceptions. They are message constants placed into the
``message`` of the error carried by a ``Failure``. Rejection messages are
generic so they never reveal which check failed or whether an account
exists.
"""


class AuthErrorMessage:
    """Authentication message constants.

    Error Categories:
        - Credentials: INVALID_CREDENTIALS, EMAIL_IN_USE, USERNAME_TAKEN
        - Wallet: INVALID_NONCE, INVALID_SIGNATURE, INVALID_MESSAGE_FORMAT
        - Federated: INVALID_ASSERTION, PROVIDER_UNCONFIGURED
        - Reset: INVALID_RESET_TOKEN, RESET_EMAIL_SENT, EMAIL_NOT_SENT
        - Session: NOT_AUTHORIZED, ACCESS_DENIED
    """

    # Credential errors
    INVALID_CREDENTIALS = "Invalid credentials"
    EMAIL_IN_USE = "Email already in use"
    USERNAME_TAKEN = "Username already taken"
    IDENTITY_IN_USE = "Identity already linked to another account"

    # Wallet errors
    INVALID_NONCE = "Invalid or expired nonce"
    INVALID_SIGNATURE = "Invalid signature"
    INVALID_MESSAGE_FORMAT = "Invalid message format"

    # Federated errors
    INVALID_ASSERTION = "Invalid or expired Google token"
    PROVIDER_UNCONFIGURED = "Google OAuth is not configured"

    # Password reset
    INVALID_RESET_TOKEN = "Invalid or expired token"
    RESET_EMAIL_SENT = "Password reset email sent if account exists"
    EMAIL_NOT_SENT = "Email could not be sent"
    PASSWORD_RESET_SUCCESS = "Password updated successfully"

    # Session errors
    NOT_AUTHORIZED = "Not authorized to access this route"
    ACCESS_DENIED = "Access Denied"

    # Internal
    INTERNAL = "Server error"
