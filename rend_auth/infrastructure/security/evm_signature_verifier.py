"""EVM wallet signature verifier (secp256k1, EIP-191 personal_sign).

Verification recovers the signer's public key from the signature and the
prefixed message hash, derives the EVM address from it and compares it with
the claimed address.

Dependencies:
    - coincurve: secp256k1 public key recovery
    - pycryptodome (Crypto.Hash.keccak): Keccak-256 hashing
"""

from coincurve import PublicKey
from Crypto.Hash import keccak

from rend_auth.core.constants import EVM_MESSAGE_PREFIX

SIGNATURE_LENGTH = 65
ADDRESS_LENGTH = 20


def keccak256(data: bytes) -> bytes:
    return keccak.new(digest_bits=256, data=data).digest()


def personal_message_hash(message: str) -> bytes:
    """Hash a message the way ``personal_sign`` does (EIP-191 version 0x45).

    keccak256("\\x19Ethereum Signed Message:\\n" + len(message) + message),
    where the length is the decimal byte length of the UTF-8 message.
    """
    message_bytes = message.encode("utf-8")
    prefix = f"{EVM_MESSAGE_PREFIX}{len(message_bytes)}".encode("utf-8")
    return keccak256(prefix + message_bytes)


def public_key_to_address(public_key: PublicKey) -> str:
    """Derive the lowercase 0x-prefixed address of a secp256k1 public key."""
    # Uncompressed key is 0x04 || X || Y; the address hashes X || Y only
    uncompressed = public_key.format(compressed=False)[1:]
    return "0x" + keccak256(uncompressed)[-ADDRESS_LENGTH:].hex()


class EvmSignatureVerifier:
    """Verify EVM ``personal_sign`` signatures.

    Signature format: 65 bytes r || s || v, hex-encoded with or without a
    ``0x`` prefix. ``v`` may be the raw recovery id (0, 1) or the legacy
    form (27, 28).

    Usage:
        verifier = EvmSignatureVerifier()
        verifier.verify_signature(message, "0x...", "0xAbC...")
    """

    def verify_signature(
        self, message: str, signature: str, claimed_address: str
    ) -> bool:
        recovered = self.recover_address(message, signature)
        if recovered is None or not isinstance(claimed_address, str):
            return False
        return recovered == claimed_address.strip().lower()

    def recover_address(self, message: str, signature: str) -> str | None:
        """Recover the signer address, or None when recovery is impossible."""
        try:
            signature_bytes = _decode_hex(signature)
        except (ValueError, TypeError, AttributeError):
            return None

        if len(signature_bytes) != SIGNATURE_LENGTH:
            return None

        recovery_id = signature_bytes[64]
        if recovery_id >= 27:
            recovery_id -= 27
        if recovery_id not in (0, 1):
            return None

        # coincurve expects the recovery id as the last byte
        recoverable = signature_bytes[:64] + bytes([recovery_id])
        try:
            public_key = PublicKey.from_signature_and_message(
                recoverable, personal_message_hash(message), hasher=None
            )
        except (ValueError, TypeError, AttributeError):
            return None

        return public_key_to_address(public_key)


def _decode_hex(value: str) -> bytes:
    hex_value = value.strip()
    if hex_value[:2].lower() == "0x":
        hex_value = hex_value[2:]
    return bytes.fromhex(hex_value)
