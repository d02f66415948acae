"""
Data containers for the Lamport signature scheme.

This module defines the high-level containers: PrivateKey, PublicKey and
Signature. Base types (Secret, SecretPair, HashPair) are defined in types.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, field_validator

from lamport_spec.types import StrictBaseModel

from ..digest import hash_bytes
from .constants import NUM_POSITIONS
from .types import HashPair, Secret, SecretPair

if TYPE_CHECKING:
    from .interface import LamportScheme


def _check_positions(name: str, value: tuple) -> tuple:
    """Reject a per-position tuple that does not cover every bit position."""
    if len(value) != NUM_POSITIONS:
        raise ValueError(f"{name} requires exactly {NUM_POSITIONS} positions, got {len(value)}")
    return value


class PrivateKey(StrictBaseModel):
    """
    The private component of a key pair. **MUST BE KEPT CONFIDENTIAL.**

    Holds two independent random secrets per bit position. A private key may
    sign **at most one** message: every signature reveals half of the secrets,
    and a second signature reveals a different half.
    """

    pairs: tuple[SecretPair, ...] = Field(repr=False)
    """`pairs[i][b]` is the secret revealed when bit `i` of the digest is `b`."""

    @field_validator("pairs")
    @classmethod
    def _validate_pairs(cls, v: tuple[SecretPair, ...]) -> tuple[SecretPair, ...]:
        return _check_positions("PrivateKey.pairs", v)


class PublicKey(StrictBaseModel):
    """
    The public-facing component of a key pair.

    Holds the digest of every secret of the matching private key, in the same
    layout, so that `hashes[i][b] == SHA256(pairs[i][b])`. Safe to publish.
    """

    hashes: tuple[HashPair, ...]
    """`hashes[i][b]` commits to the private key's `pairs[i][b]`."""

    @field_validator("hashes")
    @classmethod
    def _validate_hashes(cls, v: tuple[HashPair, ...]) -> tuple[HashPair, ...]:
        return _check_positions("PublicKey.hashes", v)

    @classmethod
    def from_private_key(cls, private_key: PrivateKey) -> PublicKey:
        """Derive the public key committing to every secret of `private_key`."""
        return cls(
            hashes=tuple((hash_bytes(zero), hash_bytes(one)) for zero, one in private_key.pairs)
        )


class Signature(StrictBaseModel):
    """
    A Lamport signature: one revealed secret per bit position.

    The secret at position `i` is the private key's `pairs[i][bit_i]`, where
    `bit_i` is bit `i` of the signed message's digest.

    A forged signature may hold `None` at positions for which no secret was
    available. `None` is the explicit "unrevealed" placeholder; a signature
    holding one never verifies.
    """

    revealed: tuple[Secret | None, ...]
    """The revealed secrets, indexed by bit position."""

    @field_validator("revealed")
    @classmethod
    def _validate_revealed(cls, v: tuple[Secret | None, ...]) -> tuple[Secret | None, ...]:
        return _check_positions("Signature.revealed", v)

    def missing_positions(self) -> list[int]:
        """Return the positions holding the unrevealed placeholder."""
        return [i for i, secret in enumerate(self.revealed) if secret is None]

    @property
    def is_complete(self) -> bool:
        """Whether every position holds a revealed secret."""
        return all(secret is not None for secret in self.revealed)

    def verify(
        self,
        message: str | bytes,
        public_key: PublicKey,
        scheme: LamportScheme,
    ) -> bool:
        """
        Verify the signature.

        This is a convenience method that delegates to `scheme.verify()`.

        Args:
            message: The message that was supposedly signed.
            public_key: The public key to verify against.
            scheme: The Lamport scheme instance to use for verification.

        Returns:
            `True` if the signature is valid, `False` otherwise.
        """
        return scheme.verify(message, self, public_key)
