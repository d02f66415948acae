"""Reusable type definitions shared by the Lamport specs."""

from .base import StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32
from .exceptions import (
    EntropyError,
    InvalidDifficultyError,
    KeyReuseError,
    LamportError,
)
from .uint import Uint64

__all__ = [
    # Core types
    "Uint64",
    "BaseBytes",
    "Bytes32",
    "StrictBaseModel",
    # Exceptions
    "LamportError",
    "EntropyError",
    "InvalidDifficultyError",
    "KeyReuseError",
]
