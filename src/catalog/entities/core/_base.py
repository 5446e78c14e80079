from pydantic import BaseModel
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity with a store-assigned integer identifier.

    ``id`` is ``None`` until the entity has been persisted.
    """

    id: int | None = PydanticField(
        default=None,
        description="Unique identifier assigned by the store",
    )


class EntityTable(SQLModel, table=False):
    """Base table with an auto-incrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the entity",
    )
