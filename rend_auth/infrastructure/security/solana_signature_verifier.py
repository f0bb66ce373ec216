"""Solana wallet signature verifier (Ed25519 detached signatures).

Dependencies:
    - PyNaCl: Ed25519 verification
    - base58: Solana address (public key) and signature encoding
"""

import base64
import binascii

import base58
from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

SIGNATURE_LENGTH = 64
PUBLIC_KEY_LENGTH = 32


def decode_signature(signature: str) -> bytes:
    """Decode a Solana signature from its wire encoding.

    Wallet clients send base64. Signatures that do not decode to 64 bytes
    as base64 are read as base58, the encoding used by Solana tooling.

    Raises:
        ValueError: If neither encoding yields a 64-byte signature.
    """
    value = signature.strip()
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        decoded = b""
    if len(decoded) == SIGNATURE_LENGTH:
        return decoded

    decoded = base58.b58decode(value)
    if len(decoded) != SIGNATURE_LENGTH:
        raise ValueError("Signature must be 64 bytes")
    return decoded


class SolanaSignatureVerifier:
    """Verify Ed25519 signatures made by Solana wallets.

    The claimed address is the base58-encoded 32-byte public key, so
    verification needs no key recovery.
    """

    def verify_signature(
        self, message: str, signature: str, claimed_address: str
    ) -> bool:
        try:
            public_key_bytes = base58.b58decode(claimed_address.strip())
            if len(public_key_bytes) != PUBLIC_KEY_LENGTH:
                return False
            verify_key = VerifyKey(public_key_bytes)

            signature_bytes = decode_signature(signature)
            message_bytes = message.encode("utf-8")

            verify_key.verify(message_bytes, signature_bytes)
            return True

        except (BadSignatureError, ValueError, TypeError, AttributeError):
            return False
