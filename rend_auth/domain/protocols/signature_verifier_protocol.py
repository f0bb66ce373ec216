"""Signature verifier protocol for wallet challenges."""

from typing import Protocol


class SignatureVerifierProtocol(Protocol):
    """Verify a wallet signature over a challenge message.

    Implementations are pure and side-effect free. Adversarial input
    (malformed encodings, wrong lengths, bad recovery ids) yields False and
    never raises.

    Implementations:
        - EvmSignatureVerifier: secp256k1 recoverable signatures (EIP-191)
        - SolanaSignatureVerifier: Ed25519 detached signatures
    """

    def verify_signature(
        self, message: str, signature: str, claimed_address: str
    ) -> bool:
        """Check that ``signature`` over ``message`` was made by the address.

        Args:
            message: Challenge message exactly as signed.
            signature: Signature in the scheme's wire encoding.
            claimed_address: Address the caller claims to own.

        Returns:
            True only for a valid signature by ``claimed_address``.
        """
        ...
