"""
End-to-end tests for the Lamport one-time signature scheme.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from lamport_spec.subspecs.digest import digest_bits, hash_bytes, message_digest
from lamport_spec.subspecs.lamport import (
    LAMPORT_SCHEME,
    NUM_POSITIONS,
    PrivateKey,
    PublicKey,
    Signature,
)

KeyPair = tuple[PrivateKey, PublicKey]


def test_key_gen_shape_and_commitment(key_pair: KeyPair) -> None:
    """Every public hash is the digest of the matching private secret."""
    private_key, public_key = key_pair

    assert len(private_key.pairs) == NUM_POSITIONS == 256
    assert len(public_key.hashes) == NUM_POSITIONS
    for secrets, hashes in zip(private_key.pairs, public_key.hashes, strict=True):
        assert len(secrets[0]) == len(secrets[1]) == 32
        assert hashes == (hash_bytes(secrets[0]), hash_bytes(secrets[1]))


def test_key_gen_secrets_are_distinct(key_pair: KeyPair) -> None:
    """All 512 secrets of a key are independent draws."""
    private_key, _ = key_pair
    secrets = {secret for pair in private_key.pairs for secret in pair}
    assert len(secrets) == 2 * NUM_POSITIONS


def test_independent_key_pairs_differ() -> None:
    sk1, pk1 = LAMPORT_SCHEME.key_gen()
    sk2, pk2 = LAMPORT_SCHEME.key_gen()

    assert sk1.pairs != sk2.pairs
    assert pk1.hashes != pk2.hashes
    assert sk1 != sk2
    assert pk1 != pk2


@pytest.mark.parametrize(
    "message",
    [
        "Hello, Lamport signatures!",
        "Test message",
        "",
        b"\x00\x01\x02",
        "unicode: é中",
    ],
)
def test_sign_verify_roundtrip(key_pair: KeyPair, message: str | bytes) -> None:
    private_key, public_key = key_pair
    signature = LAMPORT_SCHEME.sign(message, private_key)

    assert signature.is_complete
    assert LAMPORT_SCHEME.verify(message, signature, public_key)


@settings(max_examples=25)
@given(st.binary(max_size=256))
def test_roundtrip_for_any_message(key_pair: KeyPair, message: bytes) -> None:
    private_key, public_key = key_pair
    assert LAMPORT_SCHEME.verify(message, LAMPORT_SCHEME.sign(message, private_key), public_key)


def test_signature_reveals_the_half_selected_by_the_digest(key_pair: KeyPair) -> None:
    private_key, _ = key_pair
    message = "Which half?"
    signature = LAMPORT_SCHEME.sign(message, private_key)

    bits = digest_bits(message_digest(message))
    for i, bit in enumerate(bits):
        assert signature.revealed[i] == private_key.pairs[i][bit]
        assert signature.revealed[i] != private_key.pairs[i][1 - bit]


def test_sign_is_deterministic(key_pair: KeyPair) -> None:
    private_key, public_key = key_pair
    signature1 = LAMPORT_SCHEME.sign("Same message", private_key)
    signature2 = LAMPORT_SCHEME.sign("Same message", private_key)

    assert signature1 == signature2
    assert LAMPORT_SCHEME.verify("Same message", signature1, public_key)
    assert LAMPORT_SCHEME.verify("Same message", signature2, public_key)


def test_str_and_bytes_messages_are_equivalent(key_pair: KeyPair) -> None:
    private_key, public_key = key_pair
    signature = LAMPORT_SCHEME.sign("café", private_key)
    assert LAMPORT_SCHEME.verify("café".encode("utf-8"), signature, public_key)


def test_verify_rejects_different_message(key_pair: KeyPair) -> None:
    private_key, public_key = key_pair
    signature = LAMPORT_SCHEME.sign("Test message", private_key)

    assert not LAMPORT_SCHEME.verify("Different message", signature, public_key)


@settings(max_examples=25)
@given(st.binary(max_size=64), st.binary(max_size=64))
def test_verify_rejects_any_other_message(key_pair: KeyPair, m1: bytes, m2: bytes) -> None:
    if message_digest(m1) == message_digest(m2):
        return
    private_key, public_key = key_pair
    assert not LAMPORT_SCHEME.verify(m2, LAMPORT_SCHEME.sign(m1, private_key), public_key)


def test_verify_rejects_wrong_public_key(key_pair: KeyPair) -> None:
    private_key, _ = key_pair
    _, other_public_key = LAMPORT_SCHEME.key_gen()
    signature = LAMPORT_SCHEME.sign("Test message", private_key)

    assert not LAMPORT_SCHEME.verify("Test message", signature, other_public_key)


@pytest.mark.parametrize("position", [0, 7, 128, 255])
def test_single_tampered_position_invalidates(key_pair: KeyPair, position: int) -> None:
    """There is no partial success: one bad secret rejects the whole signature."""
    private_key, public_key = key_pair
    message = "Tamper with me"
    signature = LAMPORT_SCHEME.sign(message, private_key)

    bit = digest_bits(message_digest(message))[position]
    revealed = list(signature.revealed)
    # Swap in the other half of the pair: a genuine secret, but the wrong one.
    revealed[position] = private_key.pairs[position][1 - bit]
    tampered = Signature(revealed=tuple(revealed))

    assert not LAMPORT_SCHEME.verify(message, tampered, public_key)


def test_unrevealed_placeholder_never_verifies(key_pair: KeyPair) -> None:
    private_key, public_key = key_pair
    signature = LAMPORT_SCHEME.sign("Hole", private_key)
    revealed = list(signature.revealed)
    revealed[42] = None

    assert not LAMPORT_SCHEME.verify("Hole", Signature(revealed=tuple(revealed)), public_key)


def test_signature_verify_delegates_to_scheme(key_pair: KeyPair) -> None:
    private_key, public_key = key_pair
    signature = LAMPORT_SCHEME.sign("Convenience", private_key)

    assert signature.verify("Convenience", public_key, LAMPORT_SCHEME)
    assert not signature.verify("Inconvenience", public_key, LAMPORT_SCHEME)


def test_reused_key_still_verifies_every_message(
    reused_corpus: tuple[list[str], list[Signature]], key_pair: KeyPair
) -> None:
    """Reuse is not detected by the scheme: each signature on its own is valid."""
    _, public_key = key_pair
    messages, signatures = reused_corpus
    for message, signature in zip(messages, signatures, strict=True):
        assert LAMPORT_SCHEME.verify(message, signature, public_key)
