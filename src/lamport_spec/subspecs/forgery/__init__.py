"""Forgery of Lamport signatures when a private key signs more than once."""

from .constructor import forge_signature, forgery_success_probability, uncovered_positions

__all__ = [
    "forge_signature",
    "forgery_success_probability",
    "uncovered_positions",
]
