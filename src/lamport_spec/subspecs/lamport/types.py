"""Base types for the Lamport signature scheme."""

from ...types import Bytes32
from ..digest import HashDigest
from .constants import LAMPORT_CONFIG


class Secret(Bytes32):
    """
    One secret value of a private key.

    A private key holds two of these per bit position. Signing reveals the one
    selected by the message digest bit at that position.
    """

    LENGTH = LAMPORT_CONFIG.SECRET_LENGTH


SecretPair = tuple[Secret, Secret]
"""The two secrets at one bit position: index 0 for a zero bit, 1 for a one bit."""

HashPair = tuple[HashDigest, HashDigest]
"""The digests of the two secrets at one bit position."""
