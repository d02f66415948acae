"""
This package provides a Python specification for the Lamport one-time
signature scheme.

It exposes the core data structures and the main interface functions.
"""

from .constants import LAMPORT_CONFIG, NUM_POSITIONS, LamportConfig
from .containers import PrivateKey, PublicKey, Signature
from .interface import LAMPORT_SCHEME, LamportScheme
from .one_time import OneTimeSigner
from .rand import LAMPORT_RAND, Rand
from .types import Secret

__all__ = [
    "LamportScheme",
    "LamportConfig",
    "OneTimeSigner",
    "PrivateKey",
    "PublicKey",
    "Rand",
    "Secret",
    "Signature",
    "LAMPORT_CONFIG",
    "LAMPORT_RAND",
    "LAMPORT_SCHEME",
    "NUM_POSITIONS",
]
