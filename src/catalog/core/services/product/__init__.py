"""Product use-case services, one per operation."""

from .create_product import CreateProductService
from .delete_product import DeleteProductByIdService
from .find_product import FindAllProductsService, FindProductByIdService
from .paged_search import PagedSearchService
from .update_product import UpdateProductService
from .use_cases import ProductUseCases

__all__ = [
    "CreateProductService",
    "DeleteProductByIdService",
    "FindAllProductsService",
    "FindProductByIdService",
    "PagedSearchService",
    "ProductUseCases",
    "UpdateProductService",
]
