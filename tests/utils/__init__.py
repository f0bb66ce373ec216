"""Shared test helpers (key material, signers, token builders)."""

TEST_SECRET_KEY = "test-secret-key-that-is-at-least-32-characters-long"
