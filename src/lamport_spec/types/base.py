"""Reusable, strict base models shared by every subspec."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """
    A strict, immutable pydantic base model.

    - `frozen`: instances cannot be mutated once built,
    - `strict`: no implicit coercion (a list is not a tuple, a str is not bytes),
    - `extra="forbid"`: unknown fields are rejected.

    Key material, signatures and search results all derive from this model, so
    a value handed to a caller can never be changed behind its back.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        strict=True,
        validate_default=True,
        arbitrary_types_allowed=True,
    )

