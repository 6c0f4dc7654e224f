"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable; updates produce a new instance via ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)
