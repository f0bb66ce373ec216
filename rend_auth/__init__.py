"""Rend identity and session-issuance core."""

__version__ = "0.1.0"
