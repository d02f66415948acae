"""Result container for a proof-of-work search."""

from __future__ import annotations

from pydantic import model_validator

from lamport_spec.types import StrictBaseModel, Uint64

from ..digest import HashDigest


class MiningResult(StrictBaseModel):
    """
    Outcome of a nonce search.

    A found nonce and its digest are always set together. When the search
    range is exhausted, both are `None`: "not found" is never reported as a
    nonce of zero.
    """

    difficulty: int
    """The number of leading zero bits that was required."""

    nonce: Uint64 | None
    """The smallest qualifying nonce, or `None` if none was found."""

    digest: HashDigest | None
    """The digest of `prefix ++ nonce`, or `None` if no nonce was found."""

    attempts: int
    """How many nonces were hashed."""

    @model_validator(mode="after")
    def _nonce_and_digest_together(self) -> MiningResult:
        if (self.nonce is None) != (self.digest is None):
            raise ValueError("nonce and digest must both be set or both be None")
        return self

    @property
    def found(self) -> bool:
        """Whether a qualifying nonce was found."""
        return self.nonce is not None
