"""Base classes for shareport value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Immutable value object compared by value.

    Tagged variants (file lifetimes, upload limits) subclass this and carry a
    literal ``kind`` discriminator so they round-trip through pydantic unions.
    """

    model_config = ConfigDict(frozen=True)


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Value object wrapping a single primitive (accessed via ``.root``)."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
