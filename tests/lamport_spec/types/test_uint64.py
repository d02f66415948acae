"""Unsigned Integer Type Tests."""

from typing import Any

import pytest
from pydantic import ValidationError, create_model

from lamport_spec.types import Uint64


def test_bounds() -> None:
    assert Uint64(0) == 0
    assert Uint64(2**64 - 1) == 2**64 - 1
    with pytest.raises(OverflowError):
        Uint64(2**64)
    with pytest.raises(OverflowError):
        Uint64(-1)


@pytest.mark.parametrize("invalid_value", [1.0, "1", True, False, None])
def test_rejects_non_integers(invalid_value: Any) -> None:
    with pytest.raises(TypeError):
        Uint64(invalid_value)


def test_to_bytes_defaults_to_big_endian_eight_bytes() -> None:
    assert Uint64(1).to_bytes() == b"\x00" * 7 + b"\x01"
    assert Uint64(0x0102).to_bytes(byteorder="little") == b"\x02\x01" + b"\x00" * 6
    assert Uint64(5).to_bytes(2) == b"\x00\x05"


def test_repr() -> None:
    assert repr(Uint64(42)) == "Uint64(42)"


def test_pydantic_validation() -> None:
    model = create_model("Model", value=(Uint64, ...))

    instance: Any = model(value=10)
    assert isinstance(instance.value, Uint64)
    assert instance.model_dump() == {"value": 10}

    for invalid in (-1, 2**64, "10", True):
        with pytest.raises(ValidationError):
            model(value=invalid)
