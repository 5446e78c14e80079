"""Persistence port consumed by the product use cases."""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.catalog.core.models.product_page import ProductPage
from src.catalog.entities.service.product.entity import Product


class ProductPersistencePort(ABC):
    """Abstract capability set over the product record store."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Product:
        """Return the product with ``product_id``.

        Raises:
            NotFoundError: No product has that id.
        """

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every stored product, in store-defined order."""

    @abstractmethod
    def find_page(self, page_index: int, page_size: int) -> ProductPage:
        """Return one page of products.

        Args:
            page_index: 0-based page number
            page_size: Maximum number of products on the page, at least 1
        """

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert ``product`` when it has no id, otherwise replace the stored record.

        Returns:
            The persisted product, including its assigned id.
        """

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Delete the product with ``product_id``.

        Raises:
            NotFoundError: No product has that id.
        """
