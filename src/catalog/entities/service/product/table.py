"""Product database table model."""

from src.catalog.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity so the use-case layer never holds
    a session-bound row.
    """

    __tablename__ = "product"

    name: str
    description: str | None = None
