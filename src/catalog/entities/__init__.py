"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer implementing the matching core port
"""

from .service.product import Product, ProductTable

__all__ = [
    "Product",
    "ProductTable",
]
