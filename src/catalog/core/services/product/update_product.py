from loguru import logger

from src.catalog.core.ports.product_port import ProductPersistencePort
from src.catalog.entities.service.product.entity import Product

from .find_product import FindProductByIdService


class UpdateProductService:
    """Full replace of a product's mutable fields."""

    def __init__(
        self,
        product_port: ProductPersistencePort,
        find_product_by_id: FindProductByIdService,
    ):
        self._product_port = product_port
        self._find_product_by_id = find_product_by_id

    def update(self, product_id: int, changes: Product) -> Product:
        """Replace every field except ``id`` with the values in ``changes``.

        Fields left unset on ``changes`` are not carried over from the stored
        record; an omitted description is cleared.

        Args:
            product_id: Product to update
            changes: New field values; its own ``id`` is ignored

        Returns:
            The updated product

        Raises:
            NotFoundError: No product has ``product_id``.
        """
        existing = self._find_product_by_id.find_by_id(product_id)
        existing.replace_fields(changes)
        updated = self._product_port.save(existing)
        logger.bind(product_id=updated.id).info("product.updated")
        return updated
