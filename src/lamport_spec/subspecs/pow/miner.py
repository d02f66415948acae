"""
Proof-of-work nonce search.

Finds the smallest nonce such that `SHA256(prefix ++ nonce)` starts with at
least `difficulty` zero bits. The nonce is an unsigned 64-bit integer encoded
big-endian on 8 bytes.

The search is a pure function of `(prefix, difficulty)`: nonces are tried in
increasing order from zero, so the result is reproducible.
"""

from __future__ import annotations

import hashlib
import logging

from pydantic import model_validator

from lamport_spec.types import InvalidDifficultyError, StrictBaseModel, Uint64

from ..digest import HashDigest, encode_message, has_leading_zero_bits, hash_bytes
from .constants import PROD_CONFIG, TARGET_CONFIG, TEST_CONFIG, PowConfig
from .containers import MiningResult

logger = logging.getLogger(__name__)


class Miner(StrictBaseModel):
    """An instance of the proof-of-work miner for a given config."""

    config: PowConfig
    """Configuration parameters for the miner."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "Miner":
        """Reject subclasses to prevent type confusion attacks."""
        if type(self.config) is not PowConfig:
            raise TypeError("config must be exactly PowConfig, not a subclass")
        return self

    def _check_difficulty(self, difficulty: int) -> None:
        """Reject a difficulty outside `[0, MAX_DIFFICULTY]`, never clamping it."""
        max_difficulty = self.config.MAX_DIFFICULTY
        if (
            isinstance(difficulty, bool)
            or not isinstance(difficulty, int)
            or not 0 <= difficulty <= max_difficulty
        ):
            raise InvalidDifficultyError(difficulty, max_value=max_difficulty)

    def _encode_nonce(self, nonce: int) -> bytes:
        return nonce.to_bytes(self.config.NONCE_LENGTH, "big")

    def work_digest(self, prefix: str | bytes, nonce: int) -> HashDigest:
        """Return `SHA256(prefix ++ nonce)` for a single nonce."""
        return hash_bytes(encode_message(prefix) + self._encode_nonce(Uint64(nonce)))

    def verify_work(self, prefix: str | bytes, nonce: int, difficulty: int) -> bool:
        """
        Check a claimed proof of work.

        Raises:
            InvalidDifficultyError: If `difficulty` is out of range.
        """
        self._check_difficulty(difficulty)
        return has_leading_zero_bits(self.work_digest(prefix, nonce), difficulty)

    def mine(
        self,
        prefix: str | bytes,
        difficulty: int,
        nonce_limit: int | None = None,
    ) -> MiningResult:
        """
        Search for the smallest nonce meeting `difficulty`.

        Args:
            prefix: The data the nonce is appended to.
            difficulty: Required number of leading zero bits, in `[0, MAX_DIFFICULTY]`.
            nonce_limit: Exclusive upper bound on the nonces tried. Defaults to
                the config's `NONCE_LIMIT`. Callers bound the search time with it.

        Returns:
            A `MiningResult`. When every nonce below the limit fails, the result
            has `found == False`.

        Raises:
            InvalidDifficultyError: If `difficulty` is out of range. Raised before
                any hashing happens.
            ValueError: If `nonce_limit` is outside `[0, 2**64]`.
        """
        self._check_difficulty(difficulty)

        limit = self.config.NONCE_LIMIT if nonce_limit is None else nonce_limit
        if not 0 <= limit <= 2**64:
            raise ValueError(f"nonce limit {limit} is outside [0, 2**64]")

        prefix_bytes = encode_message(prefix)
        interval = self.config.PROGRESS_INTERVAL

        # Hash with a copied base state so the prefix is absorbed only once.
        base = hashlib.sha256(prefix_bytes)

        for nonce in range(limit):
            if nonce and nonce % interval == 0:
                logger.debug("Tried %d nonces...", nonce)

            h = base.copy()
            h.update(self._encode_nonce(nonce))
            digest = h.digest()

            if has_leading_zero_bits(digest, difficulty):
                logger.info(
                    "Found nonce %d for difficulty %d after %d attempts",
                    nonce,
                    difficulty,
                    nonce + 1,
                )
                return MiningResult(
                    difficulty=difficulty,
                    nonce=Uint64(nonce),
                    digest=HashDigest(digest),
                    attempts=nonce + 1,
                )

        logger.info("No nonce below %d meets difficulty %d", limit, difficulty)
        return MiningResult(difficulty=difficulty, nonce=None, digest=None, attempts=limit)


PROD_MINER = Miner(config=PROD_CONFIG)
"""A miner searching the full 64-bit nonce space."""

TEST_MINER = Miner(config=TEST_CONFIG)
"""A miner with a bounded default search range for test environments."""

TARGET_MINER = Miner(config=TARGET_CONFIG)
"""The miner selected by the `LAMPORT_ENV` environment variable."""
