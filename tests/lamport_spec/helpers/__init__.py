"""Test helpers for lamport_spec unit tests."""

from __future__ import annotations

FORGERY_TARGET = "I am forger@example.com forging this message"
"""The adversarial message used by the forgery tests."""

# Positions of FORGERY_TARGET's digest left uncovered by "Message 1".."Message k".
UNCOVERED_BY_CORPUS_SIZE: dict[int, int] = {
    1: 129,
    2: 64,
    3: 33,
    4: 14,
    5: 8,
    6: 6,
    7: 3,
    8: 3,
    9: 1,
    10: 0,
}


def corpus_messages(count: int) -> list[str]:
    """`"Message 1"` up to `"Message <count>"`."""
    return [f"Message {i}" for i in range(1, count + 1)]


__all__ = [
    "FORGERY_TARGET",
    "UNCOVERED_BY_CORPUS_SIZE",
    "corpus_messages",
]
