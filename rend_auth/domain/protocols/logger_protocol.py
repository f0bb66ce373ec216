"""LoggerProtocol definition for structured logging.

Implementations MUST keep logs structured (message + key-value context)
and safe: never log passwords, raw reset tokens, session tokens or
signatures. Token values are truncated to a short prefix when needed.

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("User registered", user_id=str(user_id))

    request_logger = logger.bind(wallet_address=address)
    request_logger.info("Nonce issued")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; the adapter adds error_type
                and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None: ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context."""
        ...
