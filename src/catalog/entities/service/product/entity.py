"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.catalog.entities.core._base import Entity


class Product(Entity):
    """Product entity representing an item in the catalog.

    This is the domain model handed to and returned from the use-case
    services. Identity is assigned by the store on first save and never
    changes afterwards.
    """

    name: str = Field(description="Name")
    description: str | None = Field(default=None, description="Description")

    def replace_fields(self, source: "Product") -> "Product":
        """Overwrite every mutable field with the values of ``source``.

        ``id`` is the only field left untouched.
        """
        self.name = source.name
        self.description = source.description
        return self

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
        )

    def __hash__(self) -> int:
        """Hash based on business attributes."""
        return hash((
            self.id,
            self.name,
            self.description,
        ))
