"""Base models for domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Tree nodes are mutated in place by the thread service, so entities are
    mutable. Invariants are checked on construction; later changes go through
    entity methods that keep them.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
    )


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are immutable and compared by value, not identity.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
