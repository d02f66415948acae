"""
The shared SHA-256 digest primitive.

Every other subspec hashes through this package, so the message encoding and
the bit-numbering convention are defined exactly once.
"""

from .sha256 import (
    DIGEST_LENGTH,
    HashDigest,
    count_leading_zero_bits,
    digest_bit,
    digest_bits,
    encode_message,
    has_leading_zero_bits,
    hash_bytes,
    message_digest,
)

__all__ = [
    "DIGEST_LENGTH",
    "HashDigest",
    "count_leading_zero_bits",
    "digest_bit",
    "digest_bits",
    "encode_message",
    "has_leading_zero_bits",
    "hash_bytes",
    "message_digest",
]
