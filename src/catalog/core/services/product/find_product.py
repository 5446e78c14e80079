"""Read-side product use cases."""

from loguru import logger

from src.catalog.core.ports.product_port import ProductPersistencePort
from src.catalog.entities.service.product.entity import Product


class FindProductByIdService:
    def __init__(self, product_port: ProductPersistencePort):
        self._product_port = product_port

    def find_by_id(self, product_id: int) -> Product:
        """Fetch a single product.

        Raises:
            NotFoundError: No product has ``product_id``.
        """
        logger.debug("Looking up product {}", product_id)
        return self._product_port.find_by_id(product_id)


class FindAllProductsService:
    def __init__(self, product_port: ProductPersistencePort):
        self._product_port = product_port

    def find_all(self) -> list[Product]:
        """Snapshot of every product currently stored."""
        return self._product_port.find_all()
