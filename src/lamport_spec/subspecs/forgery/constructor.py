"""
Forgery of Lamport signatures from a reused private key.

A Lamport signature reveals, at every bit position, the secret selected by the
signed message's digest bit. Once a key has signed several messages, an
observer holds, at each position, the secrets for every bit value that
appeared there among the signed digests. If both values appeared, any message
can be signed at that position.

### Algorithm

For a target message:

1.  Digest the target and every corpus message.
2.  For each position `i`, take the **first** corpus entry (in input order)
    whose digest has the same bit `i` as the target, and copy its revealed
    secret at `i`.
3.  Positions no corpus entry covers keep the unrevealed placeholder `None`.

No private key is involved at any point; only published signatures are read.

### Success probability

With `k` independently digested corpus messages, a position is coverable with
probability `1 - 2^-k`, so a random target is fully coverable with probability
`(1 - 2^-k)^256`. A single signature (`k = 1`) only covers positions where the
two digests agree, so full forgery would require a digest collision.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..digest import digest_bits, message_digest
from ..lamport.constants import NUM_POSITIONS
from ..lamport.containers import Signature
from ..lamport.types import Secret

logger = logging.getLogger(__name__)


def _corpus_bits(messages: Sequence[str | bytes]) -> list[tuple[int, ...]]:
    """Digest every corpus message once, returning its bits in index order."""
    return [digest_bits(message_digest(message)) for message in messages]


def _first_match(target_bit: int, position: int, corpus_bits: list[tuple[int, ...]]) -> int | None:
    """Index of the first corpus entry sharing `target_bit` at `position`."""
    for j, bits in enumerate(corpus_bits):
        if bits[position] == target_bit:
            return j
    return None


def forge_signature(
    target: str | bytes,
    messages: Sequence[str | bytes],
    signatures: Sequence[Signature],
) -> Signature:
    """
    Assemble a signature for `target` out of signatures on other messages.

    Args:
        target: The message to forge a signature for.
        messages: Messages previously signed under one private key.
        signatures: Their signatures, in the same order as `messages`.

    Returns:
        A `Signature` for `target`. Positions that no corpus entry could cover
        hold `None`; such a signature never verifies.

    Raises:
        ValueError: If `messages` and `signatures` differ in length.
    """
    if len(messages) != len(signatures):
        raise ValueError(
            f"corpus mismatch: {len(messages)} messages but {len(signatures)} signatures"
        )

    target_bits = digest_bits(message_digest(target))
    corpus_bits = _corpus_bits(messages)

    revealed: list[Secret | None] = []
    for position, bit in enumerate(target_bits):
        j = _first_match(bit, position, corpus_bits)
        revealed.append(None if j is None else signatures[j].revealed[position])

    forged = Signature(revealed=tuple(revealed))
    logger.debug(
        "Forged signature from a corpus of %d: %d/%d positions covered",
        len(messages),
        NUM_POSITIONS - len(forged.missing_positions()),
        NUM_POSITIONS,
    )
    return forged


def uncovered_positions(target: str | bytes, messages: Sequence[str | bytes]) -> list[int]:
    """
    Return the positions at which no corpus digest matches the target's bit.

    Only digests are needed: this predicts, before any signature is collected,
    exactly where `forge_signature` would leave placeholders.
    """
    target_bits = digest_bits(message_digest(target))
    corpus_bits = _corpus_bits(messages)
    return [
        position
        for position, bit in enumerate(target_bits)
        if _first_match(bit, position, corpus_bits) is None
    ]


def forgery_success_probability(corpus_size: int, num_positions: int = NUM_POSITIONS) -> float:
    """
    Probability that a random target is fully coverable by `corpus_size` digests.

    Each position is covered unless all `k` corpus bits differ from the target
    bit, which happens with probability `2^-k`.

    Raises:
        ValueError: If `corpus_size` is negative.
    """
    if corpus_size < 0:
        raise ValueError(f"corpus size must be non-negative, got {corpus_size}")
    return (1.0 - 2.0**-corpus_size) ** num_positions
