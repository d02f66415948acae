"""Shared pytest fixtures for subspecs tests."""

from __future__ import annotations

import pytest

from lamport_spec.subspecs.lamport import LAMPORT_SCHEME, PrivateKey, PublicKey, Signature
from tests.lamport_spec.helpers import corpus_messages


@pytest.fixture(scope="module")
def key_pair() -> tuple[PrivateKey, PublicKey]:
    """A key pair shared by the tests of one module."""
    return LAMPORT_SCHEME.key_gen()


@pytest.fixture(scope="module")
def reused_corpus(key_pair: tuple[PrivateKey, PublicKey]) -> tuple[list[str], list[Signature]]:
    """`"Message 1"` to `"Message 10"`, all signed with the same private key."""
    private_key, _ = key_pair
    messages = corpus_messages(10)
    return messages, [LAMPORT_SCHEME.sign(m, private_key) for m in messages]
