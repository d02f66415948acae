"""
A consumable, single-use signing capability.

`LamportScheme.sign` is a pure function and happily signs any number of
messages with the same key. `OneTimeSigner` holds the key on behalf of the
caller and hands out exactly one signature; afterwards it forgets the key and
refuses to sign again.
"""

from __future__ import annotations

import logging

from lamport_spec.types import KeyReuseError

from .containers import PrivateKey, Signature
from .interface import LAMPORT_SCHEME, LamportScheme

logger = logging.getLogger(__name__)


class OneTimeSigner:
    """Signs at most one message with the private key it wraps."""

    def __init__(self, private_key: PrivateKey, scheme: LamportScheme = LAMPORT_SCHEME):
        self._private_key: PrivateKey | None = private_key
        self._scheme = scheme

    @property
    def used(self) -> bool:
        """Whether the signing capability has been consumed."""
        return self._private_key is None

    def sign(self, message: str | bytes) -> Signature:
        """
        Sign `message`, consuming the capability.

        Raises:
            KeyReuseError: If this signer already produced a signature.
        """
        if self._private_key is None:
            raise KeyReuseError("one-time private key has already signed a message")

        private_key, self._private_key = self._private_key, None
        logger.debug("One-time signing capability consumed")
        return self._scheme.sign(message, private_key)
