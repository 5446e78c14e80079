from loguru import logger

from src.catalog.core.ports.product_port import ProductPersistencePort
from src.catalog.entities.service.product.entity import Product


class CreateProductService:
    def __init__(self, product_port: ProductPersistencePort):
        self._product_port = product_port

    def create_product(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned id.

        Any id on the incoming product is discarded; identity always comes
        from the store.
        """
        created = self._product_port.save(product.model_copy(update={"id": None}))
        logger.bind(product_id=created.id).info("product.created")
        return created
