"""
Lamport one-time signatures, their forgery under key reuse, and a
proof-of-work nonce search.

The library-level operations:

    generate_key()                               -> (PrivateKey, PublicKey)
    sign(message, private_key)                   -> Signature
    verify(message, signature, public_key)       -> bool
    forge_signature(target, messages, sigs)      -> Signature
    mine(prefix, difficulty)                     -> MiningResult
"""

from .subspecs.forgery import forge_signature
from .subspecs.lamport import (
    LAMPORT_SCHEME,
    OneTimeSigner,
    PrivateKey,
    PublicKey,
    Signature,
)
from .subspecs.pow import TARGET_MINER, MiningResult
from .types import EntropyError, InvalidDifficultyError, KeyReuseError, LamportError

generate_key = LAMPORT_SCHEME.key_gen
sign = LAMPORT_SCHEME.sign
verify = LAMPORT_SCHEME.verify
mine = TARGET_MINER.mine

__all__ = [
    "generate_key",
    "sign",
    "verify",
    "forge_signature",
    "mine",
    "OneTimeSigner",
    "PrivateKey",
    "PublicKey",
    "Signature",
    "MiningResult",
    "LamportError",
    "EntropyError",
    "InvalidDifficultyError",
    "KeyReuseError",
]
