"""Unsigned Integer Type Specification."""

from __future__ import annotations

from typing import Any, ClassVar, Literal, SupportsIndex

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """A base class for custom unsigned integer types that inherits from `int`."""

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: int) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            TypeError: If `value` is not an integer, or is a bool.
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{cls.__name__} requires an int, got {type(value).__name__}")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.int_schema(ge=0, lt=2**cls.BITS),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    def to_bytes(
        self,
        length: SupportsIndex | None = None,
        byteorder: Literal["little", "big"] = "big",
        *,
        signed: bool = False,
    ) -> bytes:
        """
        Return an array of bytes representing the integer.

        Defaults to big-endian and a fixed length based on `BITS`, which is the
        encoding nonces use when appended to a proof-of-work prefix.
        """
        actual_length = self.BITS // 8 if length is None else int(length)
        return super().to_bytes(length=actual_length, byteorder=byteorder, signed=signed)

    def __repr__(self) -> str:
        """Return a string representation of the integer."""
        return f"{type(self).__name__}({int(self)})"


class Uint64(BaseUint):
    """A 64-bit unsigned integer."""

    BITS = 64
