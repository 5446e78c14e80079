from dataclasses import dataclass

from src.catalog.core.ports.product_port import ProductPersistencePort

from .create_product import CreateProductService
from .delete_product import DeleteProductByIdService
from .find_product import FindAllProductsService, FindProductByIdService
from .paged_search import PagedSearchService
from .update_product import UpdateProductService


@dataclass(frozen=True)
class ProductUseCases:
    """Every product use case, wired to the same persistence port."""

    create: CreateProductService
    find_by_id: FindProductByIdService
    find_all: FindAllProductsService
    update: UpdateProductService
    delete_by_id: DeleteProductByIdService
    paged_search: PagedSearchService

    @classmethod
    def from_port(cls, product_port: ProductPersistencePort) -> "ProductUseCases":
        find_by_id = FindProductByIdService(product_port)
        return cls(
            create=CreateProductService(product_port),
            find_by_id=find_by_id,
            find_all=FindAllProductsService(product_port),
            update=UpdateProductService(product_port, find_by_id),
            delete_by_id=DeleteProductByIdService(product_port, find_by_id),
            paged_search=PagedSearchService(product_port),
        )
