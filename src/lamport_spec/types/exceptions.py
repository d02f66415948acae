"""Exception hierarchy for the Lamport signature, forgery and proof-of-work specs."""

from __future__ import annotations


class LamportError(Exception):
    """
    Base exception for all errors raised by this package.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class EntropyError(LamportError):
    """
    Raised when the random source cannot supply the requested bytes.

    Key generation is aborted; no key pair is ever built from degraded
    randomness.
    """


class KeyReuseError(LamportError):
    """Raised when a one-time signing capability is asked to sign a second time."""


class InvalidDifficultyError(LamportError, ValueError):
    """
    Raised when a proof-of-work difficulty is outside the supported range.

    Attributes:
        value: The rejected difficulty.
        min_value: The minimum allowed difficulty (inclusive).
        max_value: The maximum allowed difficulty (inclusive).
    """

    def __init__(self, value: object, *, min_value: int = 0, max_value: int) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value

        super().__init__(
            f"difficulty {value!r} is invalid (valid range: [{min_value}, {max_value}])"
        )
