"""
Defines the core interface for the Lamport one-time signature scheme.

Specification for the high-level functions (`key_gen`, `sign`, `verify`).

This constitutes the public API of the signature scheme.
"""

from __future__ import annotations

import hmac
import logging
from typing import Tuple

from ..digest import digest_bits, hash_bytes, message_digest
from .constants import LAMPORT_CONFIG, LamportConfig
from .containers import PrivateKey, PublicKey, Signature
from .rand import LAMPORT_RAND, Rand
from .types import HashPair, SecretPair

logger = logging.getLogger(__name__)


class LamportScheme:
    """Instance of the Lamport one-time signature scheme for a given config."""

    def __init__(self, config: LamportConfig, rand: Rand):
        """Initializes the scheme with a specific parameter set."""
        self.config = config
        self.rand = rand

    def key_gen(self) -> Tuple[PrivateKey, PublicKey]:
        """
        Generates a new one-time key pair.

        This is a **randomized** algorithm.

        ### Key Generation Algorithm

        1.  For each of the `NUM_POSITIONS` bit positions, draw two independent
            secrets from the OS random source. Index 0 is revealed when the
            message digest has a zero bit there, index 1 for a one bit.

        2.  Hash every secret. The digests, in the same layout, form the public key.

        All `2 * NUM_POSITIONS` secrets are fresh: nothing is derived from a seed
        and nothing is shared with any other key pair.

        Returns:
            A tuple containing the `PrivateKey` and `PublicKey`.

        Raises:
            EntropyError: If the random source fails. No key pair is produced.
        """
        pairs: list[SecretPair] = []
        hashes: list[HashPair] = []

        for _ in range(self.config.NUM_POSITIONS):
            pair = (self.rand.secret(), self.rand.secret())
            pairs.append(pair)
            hashes.append((hash_bytes(pair[0]), hash_bytes(pair[1])))

        logger.debug("Generated Lamport key pair over %d positions", len(pairs))
        return PrivateKey(pairs=tuple(pairs)), PublicKey(hashes=tuple(hashes))

    def sign(self, message: str | bytes, private_key: PrivateKey) -> Signature:
        """
        Produces a signature for a message.

        This is a **deterministic** algorithm: the same message and key always
        give the same signature.

        **CRITICAL SECURITY WARNING**: A private key must **NEVER** be used to sign
        two different messages. Each signature reveals the half of the secrets
        selected by the message digest; two signatures together reveal enough to
        forge signatures on other messages. The scheme does not track prior uses.
        Wrap the key in a `OneTimeSigner` to have reuse rejected.

        ### Signing Algorithm

        1.  Hash the message into a 256-bit digest.
        2.  For each position `i`, reveal `private_key.pairs[i][bit_i]`.

        Args:
            message: The message to be signed.
            private_key: The private key to sign with.

        Returns:
            The resulting `Signature` object.
        """
        bits = digest_bits(message_digest(message))
        return Signature(
            revealed=tuple(pair[bit] for pair, bit in zip(private_key.pairs, bits, strict=True))
        )

    def verify(self, message: str | bytes, signature: Signature, public_key: PublicKey) -> bool:
        """
        Verifies a signature against a public key and message.

        This is a **deterministic** algorithm.

        ### Verification Algorithm

        1.  Hash the message into a 256-bit digest.
        2.  For each position `i`, hash the revealed secret and compare it, over
            its full length, to `public_key.hashes[i][bit_i]`.

        Any single mismatch, or an unrevealed placeholder, invalidates the whole
        signature. A `False` result means the message must not be trusted.

        Args:
            message: The message that was supposedly signed.
            signature: The signature to be verified.
            public_key: The public key to verify against.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        bits = digest_bits(message_digest(message))

        for secret, hash_pair, bit in zip(
            signature.revealed, public_key.hashes, bits, strict=True
        ):
            if secret is None:
                return False
            if not hmac.compare_digest(hash_bytes(secret), hash_pair[bit]):
                return False
        return True


LAMPORT_SCHEME = LamportScheme(LAMPORT_CONFIG, LAMPORT_RAND)
"""The SHA-256 Lamport scheme."""
