"""
Defines the constants and configuration presets for the proof-of-work miner.

The production preset searches the whole 64-bit nonce space. The test preset
bounds the search so that an unlucky run fails fast instead of spinning.
"""

from pydantic import BaseModel, ConfigDict
from typing_extensions import Final

from lamport_spec.config import LAMPORT_ENV


class PowConfig(BaseModel):
    """A model holding the configuration constants for a proof-of-work preset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    MAX_DIFFICULTY: int
    """The largest accepted difficulty: every bit of the digest."""

    NONCE_LENGTH: int
    """The length in bytes of the big-endian nonce appended to the prefix."""

    NONCE_LIMIT: int
    """Exclusive upper bound of the default nonce search range."""

    PROGRESS_INTERVAL: int
    """How many nonces are tried between two progress log records."""


PROD_CONFIG: Final = PowConfig(
    MAX_DIFFICULTY=256,
    NONCE_LENGTH=8,
    NONCE_LIMIT=2**64 - 1,
    PROGRESS_INTERVAL=1_000_000,
)


TEST_CONFIG: Final = PowConfig(
    MAX_DIFFICULTY=256,
    NONCE_LENGTH=8,
    NONCE_LIMIT=2**24,
    PROGRESS_INTERVAL=10_000,
)


TARGET_CONFIG: Final = TEST_CONFIG if LAMPORT_ENV == "test" else PROD_CONFIG
"""The preset selected by the `LAMPORT_ENV` environment variable."""
