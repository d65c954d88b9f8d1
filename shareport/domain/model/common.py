"""Base model for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are frozen: changes go through ``model_copy`` or, for guest
    links, not at all.
    """

    model_config = ConfigDict(frozen=True)
