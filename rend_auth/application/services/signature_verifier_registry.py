"""Lookup of the signature verifier for each wallet scheme."""

from collections.abc import Mapping

from rend_auth.domain.enums import WalletScheme
from rend_auth.domain.protocols import SignatureVerifierProtocol


class SignatureVerifierRegistry:
    """Maps a ``WalletScheme`` to its verifier.

    Example:
        >>> registry = SignatureVerifierRegistry({
        ...     WalletScheme.EVM: EvmSignatureVerifier(),
        ...     WalletScheme.SOLANA: SolanaSignatureVerifier(),
        ... })
        >>> registry.get(WalletScheme.EVM).verify_signature(msg, sig, address)
    """

    def __init__(
        self, verifiers: Mapping[WalletScheme, SignatureVerifierProtocol]
    ) -> None:
        self._verifiers = dict(verifiers)

    def get(self, scheme: WalletScheme) -> SignatureVerifierProtocol | None:
        return self._verifiers.get(scheme)

    def supports(self, scheme: WalletScheme) -> bool:
        return scheme in self._verifiers
