"""
Defines the constants and configuration preset for the Lamport one-time
signature scheme.

The scheme is instantiated with SHA-256: every message is reduced to a 256-bit
digest, and the key holds one pair of secrets per digest bit.
"""

from pydantic import BaseModel, ConfigDict
from typing_extensions import Final

from ..digest import DIGEST_LENGTH


class LamportConfig(BaseModel):
    """A model holding the configuration constants for a Lamport preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    DIGEST_LENGTH: int
    """The length in bytes of a message digest and of a public key hash."""

    SECRET_LENGTH: int
    """The length in bytes of each secret value in a private key."""

    @property
    def NUM_POSITIONS(self) -> int:  # noqa: N802
        """
        The number of bit positions a signature covers.

        One pair of secrets exists per bit of the message digest.
        """
        return 8 * self.DIGEST_LENGTH


LAMPORT_CONFIG: Final = LamportConfig(
    DIGEST_LENGTH=DIGEST_LENGTH,
    SECRET_LENGTH=32,
)
"""The SHA-256 instantiation: 256 positions, 32-byte secrets."""

NUM_POSITIONS: Final = LAMPORT_CONFIG.NUM_POSITIONS
"""Number of bit positions in a key or signature (256)."""
