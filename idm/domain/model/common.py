"""Base model for directory records."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for records read from the directory.

    Records are frozen: the query layer never mutates what it reads.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )
