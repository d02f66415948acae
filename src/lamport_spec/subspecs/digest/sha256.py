"""
SHA-256 based digest utility.

### Bit numbering

A 256-bit digest is consumed one bit at a time. Bit `i` is taken from byte
`i // 8`, at position `i % 8` counted from the least-significant bit:

    bit(i) = (digest[i // 8] >> (i % 8)) & 1

Signing, verification and forgery all rely on this single convention.

### Leading zero bits

The proof-of-work metric reads the other way round: bytes in order, and each
byte from its most-significant bit.
"""

from __future__ import annotations

import hashlib

from lamport_spec.types import Bytes32

DIGEST_LENGTH: int = 32
"""The output length of SHA-256 in bytes."""


class HashDigest(Bytes32):
    """A 32-byte SHA-256 digest."""


def encode_message(message: str | bytes) -> bytes:
    """
    Convert a message into the exact bytes that get hashed.

    Text is encoded as UTF-8. Bytes are taken as is.

    Raises:
        TypeError: If `message` is neither `str` nor `bytes`.
    """
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray)):
        return bytes(message)
    raise TypeError(f"message must be str or bytes, not {type(message).__name__}")


def hash_bytes(data: bytes) -> HashDigest:
    """Return the SHA-256 digest of raw bytes."""
    return HashDigest(hashlib.sha256(data).digest())


def message_digest(message: str | bytes) -> HashDigest:
    """Return the SHA-256 digest of a message."""
    return hash_bytes(encode_message(message))


def digest_bit(digest: bytes, index: int) -> int:
    """
    Return bit `index` of a digest.

    Args:
        digest: The digest to read from.
        index: The bit position, in `[0, 8 * len(digest))`.

    Returns:
        `0` or `1`.

    Raises:
        IndexError: If `index` is outside the digest.
    """
    if not 0 <= index < 8 * len(digest):
        raise IndexError(f"bit index {index} out of range for a {len(digest)}-byte digest")
    return (digest[index // 8] >> (index % 8)) & 1


def digest_bits(digest: bytes) -> tuple[int, ...]:
    """Return every bit of a digest, in index order."""
    return tuple((byte >> offset) & 1 for byte in digest for offset in range(8))


def count_leading_zero_bits(digest: bytes) -> int:
    """Count the most-significant zero bits of a digest."""
    count = 0
    for byte in digest:
        if byte == 0:
            count += 8
            continue
        # `bit_length` of a non-zero byte tells how many low bits are in use.
        return count + 8 - byte.bit_length()
    return count


def has_leading_zero_bits(digest: bytes, difficulty: int) -> bool:
    """
    Check that a digest starts with at least `difficulty` zero bits.

    The first `difficulty // 8` bytes must be zero. When `difficulty % 8` is
    not zero, the top `difficulty % 8` bits of the next byte must be zero as
    well; its remaining low bits are unconstrained.

    A non-positive difficulty is always met; one longer than the digest never is.
    """
    if difficulty <= 0:
        return True
    if difficulty > 8 * len(digest):
        return False

    full_bytes, remaining_bits = divmod(difficulty, 8)
    if any(digest[:full_bytes]):
        return False

    if remaining_bits:
        mask = (0xFF << (8 - remaining_bits)) & 0xFF
        return digest[full_bytes] & mask == 0
    return True
