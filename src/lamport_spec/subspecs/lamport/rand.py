"""Random data generator for the Lamport signature scheme."""

import secrets

from pydantic import model_validator

from lamport_spec.types import EntropyError, StrictBaseModel

from .constants import LAMPORT_CONFIG, LamportConfig
from .types import Secret


class Rand(StrictBaseModel):
    """
    Source of secret key material, backed by the OS CSPRNG.

    Failure to read from the OS entropy pool is fatal: an `EntropyError` is
    raised and no fallback generator is ever used.
    """

    config: LamportConfig
    """Configuration parameters for the random generator."""

    @model_validator(mode="after")
    def enforce_strict_types(self) -> "Rand":
        """Reject subclasses to prevent type confusion attacks."""
        if type(self.config) is not LamportConfig:
            raise TypeError("config must be exactly LamportConfig, not a subclass")
        return self

    def secret(self) -> Secret:
        """Generates one fresh secret value."""
        length = self.config.SECRET_LENGTH
        try:
            data = secrets.token_bytes(length)
        except (OSError, NotImplementedError) as e:
            raise EntropyError(f"random source unavailable: {e}") from e

        if len(data) != length:
            raise EntropyError(f"random source returned {len(data)} bytes, expected {length}")
        return Secret(data)


LAMPORT_RAND = Rand(config=LAMPORT_CONFIG)
"""The random generator used by the default scheme."""
