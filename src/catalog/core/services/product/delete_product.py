from loguru import logger

from src.catalog.core.ports.product_port import ProductPersistencePort

from .find_product import FindProductByIdService


class DeleteProductByIdService:
    def __init__(
        self,
        product_port: ProductPersistencePort,
        find_product_by_id: FindProductByIdService,
    ):
        self._product_port = product_port
        self._find_product_by_id = find_product_by_id

    def delete_by_id(self, product_id: int) -> None:
        """Remove a product.

        The existence check runs first so a missing id raises
        ``NotFoundError`` before the store is touched.
        """
        product = self._find_product_by_id.find_by_id(product_id)
        self._product_port.delete_by_id(product.id)
        logger.bind(product_id=product_id).info("product.deleted")
